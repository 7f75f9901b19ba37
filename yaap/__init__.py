from . import const, convert  # noqa: F401

from .convert import Unsigned
from .flags import ErrorKind, Flag, ValueFlag
from .parser import Registry

__all__ = [
    "ErrorKind",
    "Flag",
    "Registry",
    "Unsigned",
    "ValueFlag",
]
