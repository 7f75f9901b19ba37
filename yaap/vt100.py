import sys


RED = "\033[31m"
CYAN = "\033[36m"
WHITE = "\033[37m"
YELLOW = "\033[33m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def title(text: str):
    print(f"{BOLD+WHITE+UNDERLINE}{text}{RESET}")


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
