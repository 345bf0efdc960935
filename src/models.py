"""Data models for the todo tracker.

Exposes the Task dataclass, the closed Status enum and the Command parsed
from the process arguments. Status is stored in JSON by its upper-case
name ("HOLD", "PROGRESS", "DONE"), matching the member names exactly.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from errors import InvalidStatus


class Status(Enum):
    """Lifecycle tag of a task."""
    HOLD = "HOLD"
    PROGRESS = "PROGRESS"
    DONE = "DONE"

    @classmethod
    def parse(cls, text: str) -> "Status":
        """Case-insensitive lookup; raises InvalidStatus for anything else."""
        try:
            return cls[text.upper()]
        except KeyError:
            raise InvalidStatus(text) from None


@dataclass
class Task:
    """A single todo item.

    Fields:
        id: Integer id, allocated as max(existing) + 1 on creation.
        description: Free-form text, may be empty.
        status: One of Status.HOLD, Status.PROGRESS, Status.DONE.
    """
    id: int
    description: str
    status: Status = Status.HOLD

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description, 'status': self.status.value}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from one decoded JSON object.

        Structural mismatches raise ValueError/TypeError/KeyError; the store
        turns those into CorruptStore.
        """
        if not isinstance(raw, Mapping):
            raise TypeError(f"expected an object, got {type(raw).__name__}")
        tid = raw['id']
        description = raw['description']
        status = raw['status']
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise TypeError(f"field 'id' must be an integer, got {tid!r}")
        if not isinstance(description, str):
            raise TypeError(f"field 'description' must be a string, got {description!r}")
        if status not in Status.__members__:
            raise ValueError(f"unknown status {status!r}")
        return cls(id=tid, description=description, status=Status[status])


@dataclass
class Command:
    """One parsed invocation: action plus up to three positional operands."""
    action: str
    first_arg: str
    second_arg: Optional[str] = None
    third_arg: Optional[str] = None
