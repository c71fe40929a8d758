from rpncalc.extra.exceptions import ExpressionError, LexError, MalformedExpressionError, UnbalancedParenError
from tests.test_ok import suppress_error


def test_invalid_parenthesis():
    expression = ")4+4("
    suppress_error(expression, UnbalancedParenError)


def test_begins_with_binary():
    expression = "*5+5"
    suppress_error(expression, MalformedExpressionError)


def test_two_binary_operations():
    expression = "3*/3"
    suppress_error(expression, MalformedExpressionError)


def test_two_points():
    expression = "4214.412412.412124"
    suppress_error(expression, LexError)


def test_comma_outside_function():
    expression = "5,4"
    suppress_error(expression, MalformedExpressionError)


def test_common_base():
    for expression in ("1..1", "(", "bar(2)", "2 & 3", "1 1"):
        suppress_error(expression, ExpressionError)
