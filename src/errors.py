"""Exception types raised by the parser, the store and the handlers.

Every error carries the exit code the process should end with; main()
prints the message and returns that code.
"""
from typing import Iterable

ALLOWED_STATUSES = ("HOLD", "PROGRESS", "DONE")
ACTIONS = ("add", "list", "edit", "delete")


class TodoError(Exception):
    exit_code = 1


# -------------------- argument errors --------------------
class ParseError(TodoError):
    """Raised while turning argv into a Command."""


class MissingAction(ParseError):
    def __init__(self) -> None:
        super().__init__("No action in command")


class MissingDescription(ParseError):
    def __init__(self) -> None:
        super().__init__("No description provided for 'add' action.")


class MissingArgument(ParseError):
    def __init__(self) -> None:
        super().__init__("Missing required argument (e.g., ID or description).")


class UnknownAction(TodoError):
    def __init__(self, action: str, available: Iterable[str] = ACTIONS) -> None:
        self.action = action
        super().__init__(f"Unknown action '{action}'. Available actions: {', '.join(available)}")


# -------------------- validation errors --------------------
class InvalidId(TodoError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid Task ID '{text}'. Must be a number.")


class InvalidStatus(TodoError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Invalid status string: '{text}'. Allowed: {', '.join(ALLOWED_STATUSES)}"
        )


class MissingEditFields(TodoError):
    def __init__(self) -> None:
        super().__init__("For 'edit', you must provide a new description and/or a new status.")


# -------------------- store errors --------------------
class StoreError(TodoError):
    """Base for failures reading or writing the task file."""


class CorruptStore(StoreError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to deserialize tasks: {detail}")


class StoreIoError(StoreError):
    pass


class SerializationError(StoreError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to serialize data to JSON: {detail}")
