"""taskpal - a small personal task assistant driven by short text commands."""

__version__ = "0.1.0"

from .assistant import Assistant, Response
from .parser import CommandParser, parse_command
from .storage import Storage
from .task import Deadline, Event, Task, ToDo
from .task_list import TaskList

__all__ = [
    "Assistant",
    "Response",
    "CommandParser",
    "parse_command",
    "Storage",
    "Task",
    "ToDo",
    "Deadline",
    "Event",
    "TaskList",
    "__version__",
]
