"""Command handlers for the todo tracker.

Each invocation runs one handler: load the task file, read or mutate the
in-memory list, save it back when mutated, and report. Validation errors
are raised before the store is touched; main() turns them into a message
and a non-zero exit code.
"""
import logging
import re
import sys
from pathlib import Path
from typing import Callable, Dict, Optional

from errors import InvalidId, InvalidStatus, MissingEditFields, UnknownAction
from models import Command, Status
from storage import Storage, TASKS_FILE, PathLike
from tracker import TaskList

logger = logging.getLogger(__name__)

TASK_ID_RE = re.compile(r"[+-]?[0-9]+")
EDIT_USAGE = 'Usage: todo edit <task_id> "<new_description>" [NEW_STATUS:HOLD|PROGRESS|DONE]'


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def parse_task_id(text: str) -> int:
    """ASCII digits with an optional sign; surrounding whitespace is ignored."""
    if not TASK_ID_RE.fullmatch(text.strip()):
        raise InvalidId(text)
    return int(text)


class CLI:
    def __init__(self, path: PathLike = TASKS_FILE):
        self.path: Path = Path(path)
        self._handlers: Dict[str, Callable[[Command], int]] = {
            'add': self._cmd_add,
            'list': self._cmd_list,
            'edit': self._cmd_edit,
            'delete': self._cmd_delete,
        }

    def run(self, command: Command) -> int:
        """Dispatch one parsed command; returns the process exit code."""
        action = command.action.lower()
        handler = self._handlers.get(action)
        if handler is None:
            raise UnknownAction(command.action)
        logger.debug("dispatching %s against %s", action, self.path)
        return handler(command)

    def _load(self) -> TaskList:
        return TaskList(Storage.load_tasks(self.path))

    def _save(self, task_list: TaskList) -> None:
        Storage.save_tasks(self.path, task_list.tasks)

    # -------------------- handlers --------------------
    def _cmd_add(self, command: Command) -> int:
        description = command.first_arg
        print(f'Adding new task: "{description}"')
        # An unreadable store aborts the add instead of starting a fresh list,
        # so a corrupt file is never overwritten.
        task_list = self._load()
        task = task_list.add_task(description)
        self._save(task_list)
        print(f"Task ID {task.id} added successfully.")
        return 0

    def _cmd_list(self, command: Command) -> int:
        print("Listing all tasks...")
        task_list = self._load()
        logger.debug("task summary: %s", task_list)
        if not task_list:
            print("No tasks found.")
        else:
            task_list.display()
        return 0

    def _cmd_delete(self, command: Command) -> int:
        task_id = parse_task_id(command.first_arg)
        print(f"Deleting task id: {task_id}")
        task_list = self._load()
        removed = task_list.remove_task_by_id(task_id)
        self._save(task_list)
        if removed:
            print(f"Task ID {task_id} deleted successfully.")
        else:
            print(f"Task ID {task_id} not found; nothing deleted.")
        return 0

    def _cmd_edit(self, command: Command) -> int:
        task_id = parse_task_id(command.first_arg)
        print(f"Editing task id: {task_id}")
        new_description: Optional[str] = command.second_arg
        new_status: Optional[str] = command.third_arg
        if new_description is None and new_status is None:
            _warn(EDIT_USAGE)
            raise MissingEditFields()

        task_list = self._load()
        task = task_list.find_by_id(task_id)
        if task is None:
            print(f"Task with ID {task_id} not found.")
            return 0

        if new_description is not None:
            if new_description:
                task.description = new_description
                print(f"Updated description for task ID {task_id}")
            else:
                _warn(f"Warning: New description is empty, not updating description for task ID {task_id}.")
        if new_status is not None:
            try:
                task.status = Status.parse(new_status)
                print(f"Updated status for task ID {task_id}")
            except InvalidStatus as exc:
                _warn(f"Error updating status for task ID {task_id}: {exc}")

        self._save(task_list)
        print(f"Task ID {task_id} updated successfully.")
        return 0
