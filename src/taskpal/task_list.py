"""Ordered, in-memory collection of tasks."""

import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .exceptions import InvalidInputError, TaskIndexError
from .task import Task, lines_for_label, task_from_lines

logger = logging.getLogger(__name__)


class TaskList:
    """The user's tasks, in the order they were added (or last sorted).

    Positions are 0-based in the API and 1-based in every listing shown
    to the user.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "TaskList":
        """Rebuild a task list from the lines of a storage file.

        Each task occupies a group of consecutive lines whose size depends on
        the label in its header. Any malformed group aborts the whole load.

        Raises:
            InvalidInputError: If a group cannot be turned back into a task.
        """
        lines = list(lines)
        while lines and not lines[-1].strip():
            lines.pop()

        tasks: List[Task] = []
        position = 0
        while position < len(lines):
            header = lines[position]
            try:
                size = lines_for_label(header.split(" ", 1)[0])
                group = lines[position:position + size]
                if len(group) < size:
                    raise InvalidInputError(
                        f"Task is incomplete, expected {size} lines but the file ends"
                    )
                tasks.append(task_from_lines(group))
            except InvalidInputError as e:
                raise InvalidInputError(f"Line {position + 1}: {e}") from e
            position += size

        logger.debug(f"Loaded {len(tasks)} tasks from {len(lines)} lines")
        return cls(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add_task(self, task: Task) -> None:
        """Append a task to the end of the list."""
        self._tasks.append(task)

    def delete_task(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self._check_index(index)
        return self._tasks.pop(index)

    def complete_task(self, index: int) -> Task:
        """Mark the task at ``index`` as done and return it."""
        self._check_index(index)
        task = self._tasks[index]
        task.mark_done()
        return task

    def get_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def get_size(self) -> int:
        return len(self._tasks)

    @staticmethod
    def _render(numbered: Iterable[Tuple[int, Task]]) -> str:
        return "\n".join(f"{number}.{task}" for number, task in numbered)

    def get_list(self) -> str:
        """Return the numbered listing of every task."""
        return self._render(enumerate(self._tasks, start=1))

    def filter_by_date(self, day: date) -> str:
        """Return the listing of deadlines and events that fall on ``day``."""
        return self._render(
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if task.occurs_on(day)
        )

    def filter_by_keyword(self, keyword: str) -> str:
        """Return the listing of tasks whose description contains ``keyword``."""
        return self._render(
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        )

    def sort(self, reverse: bool = False) -> None:
        """Sort tasks in place by description."""
        self._tasks.sort(key=lambda task: task.description, reverse=reverse)

    def serialize(self) -> str:
        """Return the full storage file text for this list."""
        return "".join("\n".join(task.to_lines()) + "\n" for task in self._tasks)
