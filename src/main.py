"""Main entry point for the todo tracker.

Parses argv, runs one handler against tasks.json in the working directory
and exits with the handler's status code.
"""
import sys
from typing import Optional, Sequence

from cli import CLI
from errors import ParseError, TodoError
from logging_setup import setup_logging
from command_parser import parse_command
from storage import TASKS_FILE, PathLike


def main(argv: Optional[Sequence[str]] = None, path: PathLike = TASKS_FILE) -> int:
    setup_logging()
    if argv is None:
        argv = sys.argv
    try:
        command = parse_command(argv)
    except ParseError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return exc.exit_code
    try:
        return CLI(path).run(command)
    except TodoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code


def run() -> None:
    sys.exit(main())

if __name__ == "__main__":
    run()
