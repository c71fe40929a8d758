import logging
import sys
from typing import TextIO

import rpncalc.constants as cst
from rpncalc.calculator import Calculator
from rpncalc.extra.exceptions import ExpressionError
from rpncalc.extra.types import Token
from rpncalc.extra.utils import format_number, format_tokens
from rpncalc.vars import default_registry

logger = logging.getLogger(__name__)

TRACE_TITLES = {"infix": cst.INFIX_TITLE, "rpn": cst.RPN_TITLE}


def setup_logging():
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if cst.LOG_FILE:
        handlers.append(logging.FileHandler(cst.LOG_FILE, mode="a", encoding="utf-8"))
    logging.basicConfig(
        level=cst.LOG_LEVEL,
        handlers=handlers,
        format=cst.FORMAT
    )


def make_printer(stdout: TextIO):
    def print_trace(stage: str, tokens: list[Token]):
        print(TRACE_TITLES.get(stage, stage), file=stdout)
        for line in format_tokens(tokens):
            print(line, file=stdout)
        print(file=stdout)
    return print_trace


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Entry point for application. Reads one expression from stdin and prints its value
    :param argv: command line arguments without the program name, '/q' turns on quiet mode
    :return: exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    silent = any(arg in cst.QUIET_SWITCHES for arg in argv)

    if not silent:
        print(cst.EXPRESSION_PROMPT, end="", file=stdout, flush=True)
    expression = stdin.readline().rstrip("\r\n")
    if not silent:
        print(file=stdout)
    if not expression.strip():
        logger.info("Empty expression, nothing to calculate")
        return 0

    calculator = Calculator(default_registry(), trace=None if silent else make_printer(stdout))
    try:
        result = calculator.calc(expression)
    except ExpressionError as e:
        logger.error(f"Could not calculate expression {expression}: {e}")
        return 1

    if not silent:
        print(cst.RESULT_PROMPT, end="", file=stdout)
    print(format_number(result), file=stdout)
    return 0


def run():
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
