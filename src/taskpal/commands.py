"""Structured commands produced by the command parser.

Each kind of command is its own frozen dataclass carrying only the fields
it needs. ``as_dict`` exposes the same data as a flat mapping keyed the way
the storage and presentation layers name them.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, ClassVar, Dict

from .utils.datetime import format_date_time, format_time


@dataclass(frozen=True)
class Command:
    """Base class for all parsed commands."""

    cmd: ClassVar[str] = ""
    mutates: ClassVar[bool] = False

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd}


@dataclass(frozen=True)
class Bye(Command):
    cmd: ClassVar[str] = "bye"


@dataclass(frozen=True)
class ListTasks(Command):
    cmd: ClassVar[str] = "list"


@dataclass(frozen=True)
class Done(Command):
    """Mark a task as done; ``index`` is the 1-based number shown in listings."""

    cmd: ClassVar[str] = "done"
    mutates: ClassVar[bool] = True

    index: int

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "index": self.index}


@dataclass(frozen=True)
class Delete(Command):
    """Delete a task; ``index`` is the 1-based number shown in listings."""

    cmd: ClassVar[str] = "delete"
    mutates: ClassVar[bool] = True

    index: int

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "index": self.index}


@dataclass(frozen=True)
class AddToDo(Command):
    cmd: ClassVar[str] = "todo"
    mutates: ClassVar[bool] = True

    description: str

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "details": self.description}


@dataclass(frozen=True)
class AddDeadline(Command):
    cmd: ClassVar[str] = "deadline"
    mutates: ClassVar[bool] = True

    description: str
    due: datetime

    def as_dict(self) -> Dict[str, Any]:
        return {
            "cmd": self.cmd,
            "details": self.description,
            "deadline": format_date_time(self.due),
        }


@dataclass(frozen=True)
class AddEvent(Command):
    cmd: ClassVar[str] = "event"
    mutates: ClassVar[bool] = True

    description: str
    start: datetime
    end: time

    def as_dict(self) -> Dict[str, Any]:
        return {
            "cmd": self.cmd,
            "details": self.description,
            "timing": f"{format_date_time(self.start)}-{format_time(self.end)}",
        }


@dataclass(frozen=True)
class FilterByDate(Command):
    cmd: ClassVar[str] = "date"

    date: date

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "date": self.date}


@dataclass(frozen=True)
class Find(Command):
    cmd: ClassVar[str] = "find"

    keyword: str

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "keyword": self.keyword}


@dataclass(frozen=True)
class Sort(Command):
    cmd: ClassVar[str] = "sort"
    mutates: ClassVar[bool] = True

    reverse: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {"cmd": self.cmd, "reverse": self.reverse}


COMMAND_TYPES = (Bye, ListTasks, Done, Delete, AddToDo, AddDeadline, AddEvent, FilterByDate, Find, Sort)
KEYWORDS = [command.cmd for command in COMMAND_TYPES]
