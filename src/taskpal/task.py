"""Task data model for taskpal."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple, Type

from .exceptions import InvalidInputError
from .utils.datetime import (
    display_date_time,
    display_time,
    format_date_time,
    format_time,
    parse_date_time,
    parse_timing,
)

DONE_MARKER = "done"
NOT_DONE_MARKER = "not-done"
LINE_BREAKS = ("\n", "\r")


@dataclass
class Task(ABC):
    """A single tracked item.

    Subclasses set ``label`` to the character written in the storage file
    and implement the variant-specific pieces of the display line and the
    persisted form.

    ``description`` is read-only after construction and must fit on one
    storage line. ``completed`` stays writable for ``mark_done``, so the
    class cannot be a frozen dataclass.
    """

    label: ClassVar[str] = "?"
    line_count: ClassVar[int] = 2

    description: str
    completed: bool = False

    def __post_init__(self):
        if any(separator in self.description for separator in LINE_BREAKS):
            raise InvalidInputError("A task description must fit on one line")

    def __setattr__(self, name, value):
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("A task description cannot be changed")
        super().__setattr__(name, value)

    def mark_done(self) -> None:
        """Mark the task as completed."""
        self.completed = True

    @property
    def status_icon(self) -> str:
        return "X" if self.completed else " "

    @property
    def details(self) -> str:
        """Detail text written to the storage file."""
        return self.description

    @property
    def done_marker(self) -> str:
        return DONE_MARKER if self.completed else NOT_DONE_MARKER

    def schedule_text(self) -> str:
        """Date information appended to the display line, if any."""
        return ""

    def timing_line(self) -> str:
        """Third persisted line; only dated tasks have one."""
        return ""

    @abstractmethod
    def occurs_on(self, day: date) -> bool:
        """Return True if the task falls on the given calendar date."""

    @classmethod
    def restore(cls, description: str, completed: bool, timing: Optional[str]) -> "Task":
        """Rebuild a task from the fields read back from storage."""
        return cls(description, completed)

    def to_lines(self) -> List[str]:
        """Return the lines that represent this task in the storage file."""
        lines = [f"{self.label} {self.done_marker}", self.details]
        if self.line_count == 3:
            lines.append(self.timing_line())
        return lines

    def __str__(self) -> str:
        text = f"[{self.label}][{self.status_icon}] {self.description}"
        schedule = self.schedule_text()
        if schedule:
            text += f" {schedule}"
        return text


@dataclass
class ToDo(Task):
    """A task without any date attached."""

    label: ClassVar[str] = "T"

    def occurs_on(self, day: date) -> bool:
        return False


@dataclass
class Deadline(Task):
    """A task that has to be done by a given date and time."""

    label: ClassVar[str] = "D"
    line_count: ClassVar[int] = 3

    due: datetime = None

    def __post_init__(self):
        super().__post_init__()
        if self.due is None:
            raise TypeError("A deadline needs a due date")

    @classmethod
    def from_text(cls, description: str, due_text: str, completed: bool = False) -> "Deadline":
        return cls(description, completed, due=parse_date_time(due_text))

    @classmethod
    def restore(cls, description: str, completed: bool, timing: Optional[str]) -> "Deadline":
        return cls.from_text(description, timing or "", completed)

    def occurs_on(self, day: date) -> bool:
        return self.due.date() == day

    def schedule_text(self) -> str:
        return f"(by: {display_date_time(self.due)})"

    def timing_line(self) -> str:
        return format_date_time(self.due)


@dataclass
class Event(Task):
    """A task that starts at a given date and time and ends later that day."""

    label: ClassVar[str] = "E"
    line_count: ClassVar[int] = 3

    start: datetime = None
    end: time = None

    def __post_init__(self):
        super().__post_init__()
        if self.start is None or self.end is None:
            raise TypeError("An event needs a start and an end time")

    @classmethod
    def from_text(cls, description: str, timing_text: str, completed: bool = False) -> "Event":
        start, end = parse_timing(timing_text)
        return cls(description, completed, start=start, end=end)

    @classmethod
    def restore(cls, description: str, completed: bool, timing: Optional[str]) -> "Event":
        return cls.from_text(description, timing or "", completed)

    def occurs_on(self, day: date) -> bool:
        return self.start.date() == day

    def schedule_text(self) -> str:
        return f"(at: {display_date_time(self.start)}-{display_time(self.end)})"

    def timing_line(self) -> str:
        return f"{format_date_time(self.start)}-{format_time(self.end)}"


TASK_TYPES: Dict[str, Type[Task]] = {cls.label: cls for cls in (ToDo, Deadline, Event)}


def lines_for_label(label: str) -> int:
    """Return how many storage lines a task with ``label`` occupies."""
    try:
        return TASK_TYPES[label].line_count
    except KeyError:
        raise InvalidInputError(f"Unknown task label '{label}'") from None


def parse_header(header: str) -> Tuple[Type[Task], bool]:
    """Split a ``<label> <done|not-done>`` header line into class and flag."""
    parts = header.split(" ")
    if len(parts) != 2:
        raise InvalidInputError(f"Malformed task header '{header}'")
    label, marker = parts
    if label not in TASK_TYPES:
        raise InvalidInputError(f"Unknown task label '{label}'")
    if marker not in (DONE_MARKER, NOT_DONE_MARKER):
        raise InvalidInputError(f"Unknown completion marker '{marker}'")
    return TASK_TYPES[label], marker == DONE_MARKER


def task_from_lines(lines: Sequence[str]) -> Task:
    """Rebuild a task from its group of storage lines."""
    if not lines:
        raise InvalidInputError("Missing task header")
    task_cls, completed = parse_header(lines[0])
    if len(lines) != task_cls.line_count:
        raise InvalidInputError(
            f"A '{task_cls.label}' task needs {task_cls.line_count} lines, found {len(lines)}"
        )
    description = lines[1]
    if not description.strip():
        raise InvalidInputError("Task description is empty")
    timing = lines[2] if len(lines) > 2 else None
    return task_cls.restore(description, completed, timing)
