"""Positional argument parsing.

argv[0] is the program name and is dropped. Layout is
``<action> <first_arg> [second_arg] [third_arg]``; there are no flags.
Operand validity (ids, statuses) is left to the handlers.
"""
import logging
from typing import Optional, Sequence

from errors import MissingAction, MissingArgument, MissingDescription
from models import Command

logger = logging.getLogger(__name__)


def _at(args: Sequence[str], index: int) -> Optional[str]:
    return args[index] if index < len(args) else None


def parse_command(argv: Sequence[str]) -> Command:
    args = list(argv[1:])
    action = _at(args, 0)
    if action is None:
        raise MissingAction()
    first_arg = _at(args, 1)
    if first_arg is None:
        lower = action.lower()
        if lower == 'list':
            first_arg = ''
        elif lower == 'add':
            raise MissingDescription()
        else:
            raise MissingArgument()
    if len(args) > 4:
        logger.debug("ignoring extra arguments: %r", args[4:])
    command = Command(action=action, first_arg=first_arg,
                      second_arg=_at(args, 2), third_arg=_at(args, 3))
    logger.debug("parsed %r", command)
    return command
