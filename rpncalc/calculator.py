import logging
from typing import Callable

from rpncalc.extra import utils
from rpncalc.extra.exceptions import MalformedExpressionError, UnknownFunctionError, UnknownOperatorError
from rpncalc.extra.types import Registry, Token, TokenType
from rpncalc.rpn import ConverterRPN
from rpncalc.tokenizer import Tokenizer

TraceCallback = Callable[[str, list[Token]], None]


@utils.init_default_registry
class Calculator:

    """
    Class for evaluating expressions against a registry of operators and functions
    :param registry: Registry, the built-in one if omitted
    :param trace: optional observer called as trace(stage, tokens) with stage 'infix' and then 'rpn'
    """
    def __init__(self, registry: Registry, trace: TraceCallback | None = None):
        self.registry = registry
        self.trace = trace
        self.logger = logging.getLogger(__name__)

    @utils.log_exception
    def calc(self, expression: str) -> float:
        """
        Calculates value of the expression
        :return: value of expression
        :raises ExpressionError: expression could not be tokenized, converted or evaluated
        """
        self.logger.debug(f"expression: {expression}")
        tokens = Tokenizer(logger=self.logger).tokenize(expression)
        if self.trace:
            self.trace("infix", tokens)

        rpn = ConverterRPN(self.registry, logger=self.logger).rpn(tokens)
        if self.trace:
            self.trace("rpn", rpn)

        return self.calc_rpn(rpn)

    @utils.log_exception
    def calc_rpn(self, rpn: list[Token]) -> float:
        output: list[float] = []
        operators = self.registry.operators
        func_map = self.registry.functions

        def pop_operands(count: int, name: str) -> list[float]:
            if len(output) < count:
                raise MalformedExpressionError(
                    f"'{name}' needs {count} operand(s) but only {len(output)} available", stack_size=len(output))
            if count == 0:
                return []
            args = output[-count:]
            del output[-count:]
            return args

        for t in rpn:
            if t.type is TokenType.NUMBER:
                output.append(t.value)  # type: ignore
            elif t.type is TokenType.IDENT:
                func = func_map.get(t.value)  # type: ignore
                if func is None:
                    raise UnknownFunctionError(t.value)  # type: ignore
                args = pop_operands(func.arity, t.value)  # type: ignore
                self.logger.debug(f"Calling function {t.value}({args})")
                output.append(func.callable_function(args))
            elif t.type is TokenType.OPERATION:
                op = operators.get(t.value)  # type: ignore
                if op is None:
                    raise UnknownOperatorError(t.value)  # type: ignore
                a, b = pop_operands(2, t.value)  # type: ignore
                output.append(op.callable_function(a, b))
            else:
                raise MalformedExpressionError(f"Unexpected token in RPN: {t!r}", stack_size=len(output))

        if len(output) != 1:
            raise MalformedExpressionError(f"Bad expression: {len(output)} values left after evaluation",
                                           stack_size=len(output))
        return output[0]


def evaluate(expression: str, registry: Registry | None = None, trace: TraceCallback | None = None) -> float:
    return Calculator(registry, trace=trace).calc(expression)
