"""Persistence helpers (load/save) for the task file.

The file is a pretty-printed JSON array of
``{"id": int, "description": str, "status": "HOLD"|"PROGRESS"|"DONE"}``.
A missing or blank file is an empty collection (first run). Anything else
that does not decode to that shape is a CorruptStore error.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from errors import CorruptStore, SerializationError, StoreIoError
from models import Task

logger = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.json')

PathLike = Union[str, Path]


class Storage:
    @staticmethod
    def load_tasks(path: PathLike = TASKS_FILE) -> List[Task]:
        """Read the whole collection, preserving file order."""
        path = Path(path)
        if not path.exists():
            logger.debug("%s does not exist; starting with no tasks", path)
            return []
        try:
            contents = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as exc:
            logger.debug("%s is not valid UTF-8: %s", path, exc)
            raise CorruptStore(str(exc)) from exc
        except OSError as exc:
            logger.debug("could not read %s: %s", path, exc)
            raise StoreIoError(f"Failed to read '{path}': {exc}") from exc
        if not contents.strip():
            logger.debug("%s is blank; starting with no tasks", path)
            return []
        try:
            data = json.loads(contents)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            tasks = [Task.from_dict(raw) for raw in data]
        except (ValueError, TypeError, KeyError, RecursionError) as exc:
            detail = f"missing field {exc}" if isinstance(exc, KeyError) else str(exc)
            logger.debug("could not decode %s: %s", path, detail)
            raise CorruptStore(detail) from exc
        logger.debug("loaded %d task(s) from %s", len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(path: PathLike, tasks: List[Task]) -> None:
        """Overwrite the file with the full collection (pretty-printed)."""
        path = Path(path)
        try:
            payload = json.dumps([task.to_dict() for task in tasks], indent=2)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
        except OSError as exc:
            logger.debug("could not write %s: %s", path, exc)
            raise StoreIoError(f"Failed to write '{path}': {exc}") from exc
        logger.debug("saved %d task(s) to %s", len(tasks), path)
        print(f"Successfully wrote/updated JSON data to '{path}'")
