import logging

from rpncalc.extra import utils
from rpncalc.extra.exceptions import UnbalancedParenError
from rpncalc.extra.types import Registry, Token, TokenType


@utils.init_default_registry
class ConverterRPN:
    def __init__(self, registry: Registry, logger: logging.Logger | None = None):
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)

    @utils.log_exception
    def rpn(self, tokens: list[Token]) -> list[Token]:
        """
        Converts list of tokens to RPN(shunting-yard)
        :param tokens: tokens in infix order
        :return: tokens in postfix order, commas and brackets removed
        :raises UnbalancedParenError: brackets do not match
        """
        output: list[Token] = []
        stack_ops: list[Token] = []  # operations, function names and open brackets

        def flush_argument():
            while stack_ops and stack_ops[-1].type is not TokenType.OPEN_BRACKET:
                output.append(stack_ops.pop())

        for t in tokens:
            if t.type is TokenType.NUMBER:
                output.append(t)

            elif t.type in (TokenType.IDENT, TokenType.OPEN_BRACKET):
                stack_ops.append(t)

            elif t.type is TokenType.CLOSE_BRACKET:
                flush_argument()
                if not stack_ops:
                    raise UnbalancedParenError("Closing bracket without an opening one",
                                               exc_type="unmatched_close")
                stack_ops.pop()
                if stack_ops and stack_ops[-1].type is TokenType.IDENT:
                    output.append(stack_ops.pop())

            elif t.type is TokenType.OPERATION:
                priority = self.registry.priority(t.value)  # type: ignore
                while stack_ops and stack_ops[-1].type is TokenType.OPERATION \
                        and priority <= self.registry.priority(stack_ops[-1].value):  # type: ignore
                    output.append(stack_ops.pop())
                stack_ops.append(t)

            elif t.type is TokenType.COMMA:
                flush_argument()

        for op in stack_ops[::-1]:
            if op.type is TokenType.OPEN_BRACKET:
                raise UnbalancedParenError("Opening bracket is never closed", exc_type="unmatched_open")
            output.append(op)

        self.logger.debug(f"rpn={output}")
        return output
