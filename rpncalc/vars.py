import math

from rpncalc.extra.types import Function, Operator, Registry


def float_pow(x: float, y: float) -> float:
    """
    Power with IEEE-754 results instead of exceptions
    :param x: base
    :param y: exponent
    :return: x raised to y, nan for a negative base with a fractional exponent
    """
    try:
        result = x ** y
    except (ZeroDivisionError, OverflowError):
        if x < 0 and float(y).is_integer() and y % 2:
            return -math.inf
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def float_div(x: float, y: float) -> float:
    """
    Division that follows the floating point convention for a zero divisor
    :return: x / y, +-inf for a non-zero x and nan for 0/0
    """
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def nan_on_domain_error(func):
    """Wraps a math function so a domain error gives nan, as in C"""
    def wrapper(x: float) -> float:
        try:
            return func(x)
        except ValueError:
            return math.nan
    return wrapper


safe_sin = nan_on_domain_error(math.sin)
safe_cos = nan_on_domain_error(math.cos)


OPERATORS: dict[str, Operator] = {
        "+": Operator(1, lambda x, y: x + y),
        "-": Operator(1, lambda x, y: x - y),
        "*": Operator(2, lambda x, y: x * y),
        "/": Operator(2, float_div),
        "^": Operator(3, float_pow),
    }


FUNCTIONS_CALLABLE_ENUM: dict[str, Function] = {
        "sin": Function(lambda args: safe_sin(args[0]), 1),
        "cos": Function(lambda args: safe_cos(args[0]), 1),
        "pow": Function(lambda args: float_pow(args[0], args[1]), 2),
    }


def default_registry() -> Registry:
    return Registry.create(OPERATORS, FUNCTIONS_CALLABLE_ENUM)
