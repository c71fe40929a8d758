from functools import wraps
from typing import Iterable

from rpncalc.extra.types import Registry, Token


def format_number(value: float) -> str:
    """
    Formats a number the way a C++ output stream does by default
    :param value: number to format
    :return: shortest general representation with 6 significant digits
    """
    return f"{value:g}"


def format_tokens(tokens: Iterable[Token]) -> list[str]:
    return [repr(token) for token in tokens]


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.debug(f"Exception in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper


def init_default_registry(cls):
    """
    Class decorator: fills the 'registry' argument with the built-in registry when it is omitted or None
    """

    init_original = cls.__init__

    @wraps(init_original)
    def new_init(self, registry: Registry | None = None, *args, **kwargs):
        if registry is None:
            from rpncalc.vars import default_registry
            registry = default_registry()
        return init_original(self, registry, *args, **kwargs)

    cls.__init__ = new_init
    return cls
