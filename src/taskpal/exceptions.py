"""Exception types raised by taskpal.

Every error the assistant can recover from derives from ``TaskpalError`` so
the orchestration layer can turn it into an error response in one place.
"""

from pathlib import Path
from typing import List, Optional, Union


class TaskpalError(Exception):
    """Base class for all taskpal errors."""


class StorageMissingError(TaskpalError):
    """Raised when the storage file does not exist yet."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"No saved tasks found at {self.path}")


class StorageError(TaskpalError):
    """Raised when reading or writing the storage file fails."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(message)


class InvalidInputError(TaskpalError):
    """Raised for malformed command arguments or malformed saved data."""


class DateTimeParseError(InvalidInputError):
    """Raised when a date or time does not match its fixed pattern."""

    def __init__(self, text: str, pattern: str, position: int = 0):
        self.text = text
        self.pattern = pattern
        self.position = position
        super().__init__(
            f"Text '{text}' could not be parsed at index {position}, expected format {pattern}"
        )


class InvalidInstructionError(TaskpalError):
    """Raised when the leading keyword of a command is not recognised."""

    def __init__(self, keyword: str, suggestions: Optional[List[str]] = None):
        self.keyword = keyword
        self.suggestions = suggestions or []
        message = f"I don't know what '{keyword}' means"
        if self.suggestions:
            message += f". Did you mean '{self.suggestions[0]}'?"
        super().__init__(message)


class TaskIndexError(TaskpalError, IndexError):
    """Raised when a task position is outside the task list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if size == 0:
            message = "There are no tasks in your list"
        else:
            message = f"Task {index + 1} does not exist, choose a number from 1 to {size}"
        super().__init__(message)
