import logging
from enum import Enum

import rpncalc.constants as cst
from rpncalc.extra.exceptions import LexError
from rpncalc.extra.types import Token, TokenType
from rpncalc.extra.utils import log_exception


class State(Enum):
    NONE = 0
    NUMBER = 1
    IDENT = 2


class Tokenizer:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def tokenize(self, expression: str) -> list[Token]:
        """
        Tokenizes the expression
        :param expression: raw mathematical expression(single line)
        :return: list of tokens in source order
        :raises LexError: second decimal point inside one number
        """
        tokens: list[Token] = []
        state = State.NONE
        token_start = 0
        had_point = False

        i = 0
        while i <= len(expression):  # one extra step flushes the last token
            s = expression[i] if i < len(expression) else ""

            if state is State.NONE:
                if s == "":
                    break
                if s in cst.DIGITS:
                    state = State.NUMBER
                    token_start = i
                elif s in cst.LETTERS:
                    state = State.IDENT
                    token_start = i
                elif s.isspace():
                    pass
                elif s == ",":
                    tokens.append(Token(TokenType.COMMA))
                elif s == "(":
                    tokens.append(Token(TokenType.OPEN_BRACKET))
                elif s == ")":
                    tokens.append(Token(TokenType.CLOSE_BRACKET))
                else:
                    tokens.append(Token(TokenType.OPERATION, s))

            elif state is State.NUMBER:
                if s != "" and s in cst.DIGITS:
                    pass
                elif s == cst.DECIMAL_POINT:
                    if had_point:
                        raise LexError(f"Unexpected character: '{s}' at position {i}", position=i, char=s)
                    had_point = True
                else:
                    tokens.append(Token(TokenType.NUMBER, float(expression[token_start:i])))
                    state = State.NONE
                    had_point = False
                    continue  # replay current symbol

            elif state is State.IDENT:
                if s != "" and (s in cst.LETTERS or s in cst.DIGITS):
                    pass
                else:
                    tokens.append(Token(TokenType.IDENT, expression[token_start:i]))
                    state = State.NONE
                    continue  # replay current symbol

            i += 1

        self.logger.debug(f"{tokens=}")
        return tokens
