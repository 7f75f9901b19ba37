import logging

from typing import Any, Callable

_logger = logging.getLogger(__name__)

Converter = Callable[[str], Any]

TRUE_WORDS = ("true", "True", "y", "yes", "Y", "Yes", "1")
FALSE_WORDS = ("false", "False", "n", "no", "N", "No", "0")


class Unsigned(int):
    """
    A non-negative integer, written in decimal or in hexadecimal with a
    `0x` prefix (e.g. "42", "0x2A").
    """

    def __new__(cls, value: str | int = 0):
        if isinstance(value, str):
            if value[:2] in ("0x", "0X"):
                n = int(value[2:], 16)
            else:
                n = int(value, 10)
        else:
            n = int(value)

        if n < 0:
            raise ValueError(f"'{value}' is not an unsigned integer")

        return super().__new__(cls, n)


def parseBool(text: str) -> bool:
    if text in TRUE_WORDS:
        return True
    elif text in FALSE_WORDS:
        return False
    raise ValueError(f"'{text}' is not a boolean")


def parseInt(text: str) -> int:
    return int(text, 10)


_CONVERTERS: dict[Any, Converter] = {
    bool: parseBool,
    int: parseInt,
}


def converterFor(kind: Any) -> Converter:
    """Returns the function turning a token into a value of the given kind."""
    return _CONVERTERS.get(kind, kind)


def convert(kind: Any, text: str) -> Any:
    """
    Converts a command-line token to a value of the given kind.

    Args:
        kind: `str`, `int`, `Unsigned`, `float`, `bool`, or any callable
            taking a single string.
        text: The raw token.

    Raises:
        ValueError: If the token does not spell a value of that kind.
        TypeError: If a custom converter rejects its input that way.
        ArithmeticError: If a custom converter such as `decimal.Decimal`
            rejects or overflows on its input.
    """
    value = converterFor(kind)(text)
    _logger.debug(f"Converted '{text}' to {value!r}")
    return value


def defaultValue(kind: Any) -> Any:
    """Returns the value held by a slot before anything is converted into it."""
    if kind is bool:
        return False
    elif kind is Unsigned:
        return Unsigned(0)
    elif kind is int:
        return 0
    elif kind is float:
        return 0.0
    elif kind is str:
        return ""
    else:
        return None
