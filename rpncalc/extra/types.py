from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

import rpncalc.constants as cst


class TokenType(Enum):
    NUMBER = "Number"
    IDENT = "Ident"
    OPERATION = "Operation"
    COMMA = "Comma"
    OPEN_BRACKET = "OpenBracket"
    CLOSE_BRACKET = "CloseBracket"


@dataclass(frozen=True)
class Token:
    """
    Class representing a single lexical unit of an expression
    :param type: kind of the token
    :param value: float for numbers, name for identifiers, symbol for operations, None otherwise
    """
    type: TokenType
    value: float | str | None = None

    def __repr__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"Token({self.type.value}, {self.value:g})"
        if self.type is TokenType.IDENT:
            return f'Token({self.type.value}, "{self.value}")'
        if self.type is TokenType.OPERATION:
            return f"Token({self.type.value}, {self.value})"
        return f"Token({self.type.value})"


@dataclass(frozen=True)
class Operator:
    """
    Class representing a binary operator
    :param priority: priority of operator(higher binds tighter)
    :param callable_function: function called with left and right operands
    """
    priority: int
    callable_function: Callable[[float, float], float]


@dataclass(frozen=True)
class Function:
    """
    Class representing a function
    :param callable_function: function called with the list of arguments
    :param arity: exact amount of args
    """
    callable_function: Callable[[list[float]], float]
    arity: int


@dataclass(frozen=True)
class Registry:
    """
    Read-only table of known operators and functions
    :param operators: map from operator symbol to Operator dataclass
    :param functions: map from function name to Function dataclass
    """
    operators: Mapping[str, Operator] = field(default_factory=lambda: MappingProxyType({}))
    functions: Mapping[str, Function] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(cls, operators: Mapping[str, Operator], functions: Mapping[str, Function]) -> "Registry":
        """
        Validates the tables and freezes copies of them
        :raises ValueError: operator symbol the tokenizer can not produce or invalid arity
        """
        for symbol in operators:
            if len(symbol) != 1:
                raise ValueError(f"Operator '{symbol}' must be exactly one character long")
            if symbol in cst.DIGITS or symbol in cst.LETTERS or symbol in cst.STRUCTURAL_SYMBOLS or symbol.isspace():
                raise ValueError(f"Symbol '{symbol}' can not be used as an operator")
        for name, func in functions.items():
            if not name or name[0] not in cst.LETTERS or not all(s in cst.LETTERS or s in cst.DIGITS for s in name):
                raise ValueError(f"Function name '{name}' is not a valid identifier")
            if func.arity < 0:
                raise ValueError(f"Function '{name}' can not take {func.arity} arguments")
        return cls(MappingProxyType(dict(operators)), MappingProxyType(dict(functions)))

    def priority(self, symbol: str) -> int:
        operator = self.operators.get(symbol)
        if operator is None:
            return cst.DEFAULT_PRIORITY
        return operator.priority
