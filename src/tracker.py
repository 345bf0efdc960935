"""Task list logic: holds tasks in insertion order, id allocation, mutation,
and rendering.

Ids are allocated as one past the highest existing id, so a fresh list
starts at 1 and ids never collide with tasks already on disk.
"""
import logging
from typing import Iterable, List, Optional

from models import Status, Task
from theme import color, ID_COLOR, STATUS_COLOR, BOLD

logger = logging.getLogger(__name__)


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self._next_id: int = max((t.id for t in self.tasks), default=0) + 1

    def __len__(self) -> int:
        return len(self.tasks)

    # -------------------- id management --------------------
    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        logger.debug("allocated task id %d", nid)
        return nid

    # -------------------- queries --------------------
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """First task with the given id, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    # -------------------- task operations --------------------
    def add_task(self, description: str) -> Task:
        task = Task(id=self._allocate_id(), description=description, status=Status.HOLD)
        self.tasks.append(task)
        return task

    def remove_task_by_id(self, task_id: int) -> int:
        """Drop every task with this id; returns how many were removed."""
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        return before - len(self.tasks)

    # -------------------- display --------------------
    @staticmethod
    def format_task(task: Task) -> str:
        tid = color(str(task.id), ID_COLOR, BOLD)
        status = color(task.status.value, STATUS_COLOR.get(task.status, ''))
        return f'ID: {tid}, Desc: "{task.description}", Status: {status}'

    def display(self) -> None:
        for task in self.tasks:
            print(self.format_task(task))

    def __str__(self) -> str:
        counts = {s: sum(1 for t in self.tasks if t.status is s) for s in Status}
        return ', '.join(f'{s.value}: {n} tasks' for s, n in counts.items())
