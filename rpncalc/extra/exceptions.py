from typing import Literal


class ExpressionError(Exception):
    """Base class for every error raised while evaluating an expression"""


class LexError(ExpressionError):
    def __init__(self, message, position: int, char: str):
        super().__init__(message)
        self.position = position
        self.char = char


class UnbalancedParenError(ExpressionError):
    def __init__(self, message, exc_type: Literal["unmatched_close", "unmatched_open"]):
        super().__init__(message)
        self.exc_type = exc_type


class UnknownFunctionError(ExpressionError):
    def __init__(self, name: str):
        super().__init__(f"Unknown function: {name}")
        self.name = name


class UnknownOperatorError(ExpressionError):
    def __init__(self, symbol: str):
        super().__init__(f"Unknown operation: {symbol}")
        self.symbol = symbol


class MalformedExpressionError(ExpressionError):
    def __init__(self, message, stack_size: int):
        super().__init__(message)
        self.stack_size = stack_size
