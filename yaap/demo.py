import sys
import logging

from typing import Optional

from . import const, vt100
from .convert import Unsigned
from .flags import Flag, ValueFlag
from .parser import Registry

_logger = logging.getLogger(__name__)

DEMO_DESCRIPTION = (
    "Test the Argument Parser 'yaap'. It simply displays the following option as\n"
    "entered in the command line."
)


def setupLogging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def describe(flag: Flag) -> str:
    if not flag.exists():
        return "n/a"
    if isinstance(flag, ValueFlag):
        return " ; ".join(str(v) for v in flag.values())
    return "Yes"


def main(argv: Optional[list[str]] = None) -> int:
    """
    Declares the demo's flags over `argv` (default: `sys.argv`) and prints
    what was found.

    Try for instance:
        yaap-demo -i input.vti -vV -o output.vti -s .558 .558 0.89 -t 0x1F
    """
    if argv is None:
        argv = [const.ARGV0] + sys.argv[1:]

    try:
        parser = Registry(argv, DEMO_DESCRIPTION)

        inputOpt = parser.addValueFlag("i", "Input file (.vti)", True)
        extentOpt = parser.addValueFlag(
            "e",
            "Extent (dimension): xmin xmax ymin ymax zmin zmax (integer)",
            kind=int,
            arity=6,
        )
        spacingOpt = parser.addValueFlag(
            "s", "Spacing (size of pixel): x y z (double)", True, kind=float, arity=3
        )
        outputOpt = parser.addValueFlag("o", "Output file (.vti)", True)
        tagOpt = parser.addValueFlag(
            "t", "UINT Tag. Can be hexa (prefix with 0x)", True, kind=Unsigned
        )
        verboseOpt = parser.addFlag("v", "Verbose output")
        versionOpt = parser.addFlag("V", "Display version")
        helpOpt = parser.addFlag("h", "Display a brief help")

        setupLogging(verboseOpt.exists())
        _logger.debug(f"Parsed {len(argv) - 1} argument(s), valid: {parser.isValid()}")

        if not parser.isValid() or helpOpt.exists() or len(argv) <= 1:
            if not parser.isValid():
                flagged = ", ".join(f"-{f.identifier()}" for f in parser.flags() if f.hasError())
                vt100.error(f"Invalid command line: {flagged}")
            parser.usage()
            return 0

        if versionOpt.exists():
            vt100.title(f"{const.ARGV0} v{const.VERSION_STR}")

        print(f"Verbose? {'Yes' if verboseOpt.exists() else 'No'}")
        print(f"Version? {'Yes' if versionOpt.exists() else 'No'}")
        print(f"Input filename: {describe(inputOpt)}")
        print(f"Output filename: {describe(outputOpt)}")
        print(f"Tag: {describe(tagOpt)}")
        print(f"Extent: {describe(extentOpt)}")
        print(f"Spacing: {describe(spacingOpt)}")
        return 0

    except KeyboardInterrupt:
        print()
        return 1
