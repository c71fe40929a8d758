import os
import string

FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE: str | None = os.environ.get("RPNCALC_LOG_FILE") or None
LOG_LEVEL = os.environ.get("RPNCALC_LOG_LEVEL", "WARNING").upper()

DIGITS = string.digits
LETTERS = string.ascii_letters
DECIMAL_POINT = "."
STRUCTURAL_SYMBOLS = set(",()")

DEFAULT_PRIORITY = 0  # priority of any symbol missing from the registry

QUIET_SWITCHES = {"/q", "-q", "--quiet"}

EXPRESSION_PROMPT = "Expression: "
RESULT_PROMPT = "Result: "
INFIX_TITLE = "Infix:"
RPN_TITLE = "Reverse Polish notation:"
