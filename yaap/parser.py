import sys
import logging

from typing import Any, Sequence, TextIO

from .flags import Flag, ValueFlag

_logger = logging.getLogger(__name__)


class Registry:
    """
    Owns the declared flags of a program and matches them against its
    command line.

    Each `add*` call matches the new flag against the arguments right away,
    so the registry is valid only as long as none of the flags declared so
    far has an error.
    """

    _argv: tuple[str, ...]
    _flags: list[Flag]
    _error: bool
    _description: str

    def __init__(self, argv: Sequence[str], description: str = ""):
        """
        Args:
            argv: The raw argument vector, program name first.
            description: Free-form text shown in the usage banner.
        """
        self._argv = tuple(argv)
        self._flags = []
        self._error = False
        self._description = description

    def _declare(self, flag: Flag) -> Flag:
        flag.match(self._argv)
        self._flags.append(flag)
        if flag.hasError():
            self._error = True
        _logger.debug(f"Declared {flag!r}")
        return flag

    def addFlag(self, identifier: str, description: str, required: bool = False) -> Flag:
        """Declares a boolean switch and checks whether it was given."""
        return self._declare(Flag(identifier, description, required))

    def addValueFlag(
        self,
        identifier: str,
        description: str,
        required: bool = False,
        kind: Any = str,
        arity: int = 1,
    ) -> ValueFlag:
        """
        Declares a flag taking `arity` values of type `kind` and reads them
        from the tokens following it.
        """
        flag = ValueFlag(identifier, description, required, kind, arity)
        self._declare(flag)
        return flag

    def isValid(self) -> bool:
        return not self._error

    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    def arguments(self) -> tuple[str, ...]:
        return self._argv

    def program(self) -> str:
        return self._argv[0] if len(self._argv) > 0 else ""

    def description(self) -> str:
        return self._description

    def setDescription(self, description: str):
        self._description = description

    # --- Usage -------------------------------------------------------------- #

    def commandLine(self) -> str:
        """The synthesized command template, e.g. `prog [-v] [-s x x x]`."""
        return self.program() + "".join(flag.usageFragment() for flag in self._flags)

    def renderUsage(self) -> str:
        program = self.program()
        res = f"\nUtility {program} :\n"
        res += f"\n{self._description}\n"
        res += f"\nUsage: \n [shell]$ {self.commandLine()}\n"

        for flag in self._flags:
            marker = "     *\t" if flag.hasError() else "\t"
            requirement = "Required" if flag.isRequired() else "Optional"
            res += f"{marker}-{flag.identifier()} : {flag.description()} ({requirement}).\n"

        res += "* indicate(s) wrong argument(s).\n"
        return res

    def usage(self, file: TextIO | None = None):
        """Writes the usage message, to stdout unless told otherwise."""
        print(self.renderUsage(), end="", file=file or sys.stdout)
