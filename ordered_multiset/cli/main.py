import sys
from typing import Callable, Dict, List, Optional

from ordered_multiset.cli import sliding_window

COMMANDS: Dict[str, Callable[[Optional[List[str]]], None]] = {
    "sliding-window": sliding_window.main,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point of the `ordered-multiset` tool; the first argument selects the command."""
    if argv is None:
        argv = sys.argv[1:]

    command_names = ", ".join(COMMANDS)
    if not argv:
        raise ValueError(f"Please choose a command from: {command_names}")

    command, *command_argv = argv
    if command not in COMMANDS:
        raise ValueError(f"Command {command} not supported; choose from: {command_names}")

    COMMANDS[command](command_argv)


if __name__ == "__main__":
    main()
