import logging

from enum import Enum
from typing import Any, Sequence

from . import convert

_logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """
    Why a flag ended up in error after matching.
    """

    MISSING_REQUIRED = "missing-required"
    INSUFFICIENT_ARGUMENTS = "insufficient-arguments"
    CONVERSION_FAILURE = "conversion-failure"


def isOptionStatement(token: str) -> bool:
    """A token is an option statement when it starts with a dash."""
    return token.startswith("-")


def _checkIdentifier(identifier: str) -> str:
    if not isinstance(identifier, str) or len(identifier) != 1:
        raise ValueError(f"Flag identifier must be a single character, got {identifier!r}")
    return identifier


class Flag:
    """
    A boolean switch, identified by a single character.

    The identifier, description and requirement are fixed at construction.
    Presence and errors are filled in by `match()`, which a `Registry` calls
    exactly once, when the flag is declared.
    """

    _identifier: str
    _description: str
    _required: bool
    _present: bool
    _errors: list[ErrorKind]

    def __init__(self, identifier: str, description: str, required: bool = False):
        self._identifier = _checkIdentifier(identifier)
        self._description = description
        self._required = required
        self._present = False
        self._errors = []

    def __repr__(self):
        return f"{type(self).__name__}(-{self._identifier}, present={self._present}, errors={self._errors})"

    def identifier(self) -> str:
        return self._identifier

    def description(self) -> str:
        return self._description

    def exists(self) -> bool:
        """True if the flag was found on the command line."""
        return self._present

    def isRequired(self) -> bool:
        return self._required

    def hasError(self) -> bool:
        """True if the flag is missing while required, or its values are unusable."""
        return len(self._errors) > 0

    def errors(self) -> list[ErrorKind]:
        return list(self._errors)

    def raiseError(self, kind: ErrorKind):
        _logger.info(f"Flag '-{self._identifier}': {kind.value}")
        self._errors.append(kind)

    def usageFragment(self) -> str:
        """How the flag shows up in the synthesized command line."""
        return f" [-{self._identifier}]"

    def _checkRequired(self):
        if self._required and not self._present:
            self.raiseError(ErrorKind.MISSING_REQUIRED)

    def match(self, argv: Sequence[str]):
        """
        Looks for the flag in every option statement of `argv`, skipping the
        program name. Switches may be concatenated after a single dash, so
        `-vV` matches both `v` and `V`.
        """
        for i, token in enumerate(argv[1:], start=1):
            if not isOptionStatement(token):
                continue
            if self._identifier in token[1:]:
                _logger.debug(f"Flag '-{self._identifier}' found in token {i} '{token}'")
                self._present = True

        self._checkRequired()


class ValueFlag(Flag):
    """
    A flag followed by a fixed number of typed values, e.g. `-s 0.5 0.5 1.0`.

    The flag must stand alone in its token and its values must be the tokens
    immediately following it. `values()` always has exactly `arity()` slots;
    when `hasError()` is true their content is meaningless.
    """

    _kind: Any
    _values: list[Any]

    def __init__(
        self,
        identifier: str,
        description: str,
        required: bool = False,
        kind: Any = str,
        arity: int = 1,
    ):
        super().__init__(identifier, description, required)
        if arity < 1:
            raise ValueError(f"Flag '-{identifier}' must take at least one value, got {arity}")
        self._kind = kind
        self._values = [convert.defaultValue(kind) for _ in range(arity)]

    def kind(self) -> Any:
        return self._kind

    def arity(self) -> int:
        return len(self._values)

    def value(self, slot: int = 0) -> Any:
        if slot < 0 or slot >= len(self._values):
            raise IndexError(
                f"Flag '-{self._identifier}' has {len(self._values)} value(s), no slot {slot}"
            )
        return self._values[slot]

    def values(self) -> tuple[Any, ...]:
        return tuple(self._values)

    def usageFragment(self) -> str:
        return f" [-{self._identifier}{' x' * self.arity()}]"

    def _consume(self, argv: Sequence[str], index: int):
        arity = self.arity()
        if index + arity >= len(argv):
            _logger.debug(
                f"Flag '-{self._identifier}' expects {arity} value(s), only {len(argv) - index - 1} left"
            )
            self.raiseError(ErrorKind.INSUFFICIENT_ARGUMENTS)
            return

        for slot in range(arity):
            token = argv[index + 1 + slot]
            try:
                self._values[slot] = convert.convert(self._kind, token)
            except (ValueError, TypeError, ArithmeticError) as e:
                _logger.debug(f"Flag '-{self._identifier}' slot {slot}: {e}")
                self._values[slot] = convert.defaultValue(self._kind)
                self.raiseError(ErrorKind.CONVERSION_FAILURE)

    def match(self, argv: Sequence[str]):
        """
        Looks for tokens whose second character is the identifier and
        converts the `arity()` tokens that follow each of them. A repeated
        flag overwrites the values of the previous occurrence.
        """
        for i, token in enumerate(argv[1:], start=1):
            if not isOptionStatement(token):
                continue
            if token[1:2] == self._identifier:
                _logger.debug(f"Flag '-{self._identifier}' found in token {i} '{token}'")
                self._present = True
                self._consume(argv, i)

        self._checkRequired()
