"""The assistant: applies parsed commands to the task list and saves it."""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Type, Union

from .commands import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Bye,
    Command,
    Delete,
    Done,
    FilterByDate,
    Find,
    ListTasks,
    Sort,
)
from .exceptions import InvalidInputError, StorageError, StorageMissingError, TaskpalError
from .parser import CommandParser
from .storage import Storage
from .task import Deadline, Event, ToDo
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)

HandlerResult = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class Response:
    """What a presentation layer gets back for one line of input.

    Attributes:
        message: The assistant's reply.
        tasks: Task listing to show next to the reply, or None.
        is_error: True when the reply describes an error.
    """

    message: str
    tasks: Optional[str]
    is_error: bool = False


class Assistant:
    """Owns the task list and its storage file for one session."""

    def __init__(self, file_path: Union[str, Path], ui: Optional[Ui] = None):
        self.storage = Storage(file_path)
        self.ui = ui or Ui()
        self.parser = CommandParser()
        self.is_exit = False
        self.startup_message: Optional[str] = None
        self.task_list = self._load()

        self._handlers: Dict[Type[Command], Callable[[Command], HandlerResult]] = {
            Bye: self._bye,
            ListTasks: self._list,
            Done: self._done,
            Delete: self._delete,
            AddToDo: self._add_todo,
            AddDeadline: self._add_deadline,
            AddEvent: self._add_event,
            FilterByDate: self._filter_by_date,
            Find: self._find,
            Sort: self._sort,
        }

    def _load(self) -> TaskList:
        try:
            task_list = TaskList.from_lines(self.storage.get_storage_contents())
        except StorageMissingError as e:
            logger.info(f"{e}, starting with an empty task list")
            return TaskList()
        except (InvalidInputError, StorageError) as e:
            logger.warning(f"Could not load tasks from {self.storage.file_path}: {e}")
            self.startup_message = self.ui.error_message(
                e, f"Please check the data in {self.storage.file_path}"
            )
            return TaskList()
        logger.info(f"Loaded {len(task_list)} tasks from {self.storage.file_path}")
        return task_list

    def save_tasks(self) -> None:
        """Write the whole task list to the storage file."""
        self.storage.write_to_storage(self.task_list.serialize(), append=False)

    def get_tasks(self) -> str:
        return self.task_list.get_list()

    def get_response(self, input_text: str) -> Response:
        """Handle one line of input and return the reply.

        Errors never escape: they become a response with ``is_error`` set and
        the task list is left as it was before the failing command.
        """
        snapshot = None
        try:
            command = self.parser.parse(input_text)
            handler = self._handlers[type(command)]
            if command.mutates:
                snapshot = copy.deepcopy(self.task_list)
            message, tasks = handler(command)
            if command.mutates:
                self.save_tasks()
        except TaskpalError as e:
            if snapshot is not None:
                self.task_list = snapshot
            logger.debug(f"Command '{input_text}' failed: {e}")
            return Response(self.ui.error_message(e), self.get_tasks(), True)
        return Response(message, tasks, False)

    # -------------------- command handlers --------------------
    def _bye(self, command: Bye) -> HandlerResult:
        self.save_tasks()
        self.is_exit = True
        return self.ui.farewell(), None

    def _list(self, command: ListTasks) -> HandlerResult:
        return self.ui.list_message(len(self.task_list)), self.get_tasks()

    def _done(self, command: Done) -> HandlerResult:
        task = self.task_list.complete_task(command.index - 1)
        return self.ui.done_message(task), self.get_tasks()

    def _delete(self, command: Delete) -> HandlerResult:
        task = self.task_list.delete_task(command.index - 1)
        return self.ui.delete_message(task, len(self.task_list)), self.get_tasks()

    def _add(self, task) -> HandlerResult:
        self.task_list.add_task(task)
        return self.ui.add_task_message(task, len(self.task_list)), self.get_tasks()

    def _add_todo(self, command: AddToDo) -> HandlerResult:
        return self._add(ToDo(command.description))

    def _add_deadline(self, command: AddDeadline) -> HandlerResult:
        return self._add(Deadline(command.description, due=command.due))

    def _add_event(self, command: AddEvent) -> HandlerResult:
        return self._add(Event(command.description, start=command.start, end=command.end))

    def _filter_by_date(self, command: FilterByDate) -> HandlerResult:
        return self.ui.matching_date(command.date), self.task_list.filter_by_date(command.date)

    def _find(self, command: Find) -> HandlerResult:
        return self.ui.matching_keyword(command.keyword), self.task_list.filter_by_keyword(command.keyword)

    def _sort(self, command: Sort) -> HandlerResult:
        self.task_list.sort(command.reverse)
        return self.ui.sort_message(command.reverse), self.get_tasks()
