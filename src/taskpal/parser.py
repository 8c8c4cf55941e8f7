"""Command parser: turns one line of user input into a ``Command``."""

import logging
from typing import Callable, Dict, List

from fuzzywuzzy import fuzz, process

from .commands import (
    KEYWORDS,
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
from .exceptions import InvalidInputError, InvalidInstructionError
from .utils.datetime import DATE_TIME_PATTERN, TIME_PATTERN, parse_date, parse_date_time, parse_timing

logger = logging.getLogger(__name__)

DEADLINE_SEPARATOR = "/by"
EVENT_SEPARATOR = "/at"
REVERSE_FLAG = "reverse"


def suggest_keywords(keyword: str, limit: int = 2) -> List[str]:
    """Return known keywords that look like a mistyped ``keyword``."""
    if not keyword:
        return []
    matches = process.extractBests(keyword, KEYWORDS, scorer=fuzz.ratio, score_cutoff=60, limit=limit)
    return [match[0] for match in matches]


class CommandParser:
    """Parses the fixed command grammar.

    Keywords are matched exactly (``List`` is not ``list``). Parsing never
    touches the task list or the storage file.
    """

    def __init__(self):
        self._handlers: Dict[str, Callable[[str], Command]] = {
            "bye": self._parse_bye,
            "list": self._parse_list,
            "done": self._parse_done,
            "delete": self._parse_delete,
            "todo": self._parse_todo,
            "deadline": self._parse_deadline,
            "event": self._parse_event,
            "date": self._parse_date,
            "find": self._parse_find,
            "sort": self._parse_sort,
        }

    def parse(self, line: str) -> Command:
        """Parse ``line`` into a command.

        Raises:
            InvalidInstructionError: If the leading keyword is unknown.
            InvalidInputError: If the arguments are missing or malformed
                or the input spans more than one line.
            DateTimeParseError: If a date or time does not match its pattern.
        """
        text = line.strip()
        if "\n" in text or "\r" in text:
            raise InvalidInputError("Please give one command per line")
        keyword, _, arguments = text.partition(" ")
        handler = self._handlers.get(keyword)
        if handler is None:
            suggestions = suggest_keywords(keyword)
            logger.debug(f"Unknown keyword '{keyword}', suggestions: {suggestions}")
            raise InvalidInstructionError(keyword, suggestions)
        return handler(arguments.strip())

    # -------------------- argument helpers --------------------
    @staticmethod
    def _no_arguments(keyword: str, arguments: str) -> None:
        if arguments:
            raise InvalidInputError(f"'{keyword}' does not take any arguments")

    @staticmethod
    def _task_number(keyword: str, arguments: str) -> int:
        if not arguments:
            raise InvalidInputError(f"Please tell me which task to {keyword}, e.g. '{keyword} 2'")
        try:
            number = int(arguments)
        except ValueError:
            raise InvalidInputError(f"'{arguments}' is not a task number") from None
        if number < 1:
            raise InvalidInputError(f"Task numbers start from 1, got {number}")
        return number

    @staticmethod
    def _description(keyword: str, text: str) -> str:
        if not text:
            raise InvalidInputError(f"The description of a {keyword} cannot be empty")
        return text

    @staticmethod
    def _split_clause(keyword: str, arguments: str, separator: str, example: str):
        description, found, clause = arguments.partition(separator)
        description = description.strip()
        clause = clause.strip()
        CommandParser._description(keyword, description)
        if not found or not clause:
            raise InvalidInputError(
                f"A {keyword} needs a '{separator}' part, e.g. '{keyword} {example}'"
            )
        return description, clause

    # -------------------- keyword handlers --------------------
    def _parse_bye(self, arguments: str) -> Command:
        self._no_arguments("bye", arguments)
        return Bye()

    def _parse_list(self, arguments: str) -> Command:
        self._no_arguments("list", arguments)
        return ListTasks()

    def _parse_done(self, arguments: str) -> Command:
        return Done(self._task_number("done", arguments))

    def _parse_delete(self, arguments: str) -> Command:
        return Delete(self._task_number("delete", arguments))

    def _parse_todo(self, arguments: str) -> Command:
        return AddToDo(self._description("todo", arguments))

    def _parse_deadline(self, arguments: str) -> Command:
        description, due_text = self._split_clause(
            "deadline", arguments, DEADLINE_SEPARATOR, f"return book /by {DATE_TIME_PATTERN}"
        )
        return AddDeadline(description, parse_date_time(due_text))

    def _parse_event(self, arguments: str) -> Command:
        description, timing = self._split_clause(
            "event", arguments, EVENT_SEPARATOR, f"meeting /at {DATE_TIME_PATTERN}-{TIME_PATTERN}"
        )
        start, end = parse_timing(timing)
        return AddEvent(description, start, end)

    def _parse_date(self, arguments: str) -> Command:
        if not arguments:
            raise InvalidInputError("Please give a date, e.g. 'date 2024-12-01'")
        return FilterByDate(parse_date(arguments))

    def _parse_find(self, arguments: str) -> Command:
        if not arguments:
            raise InvalidInputError("Please give a keyword to search for")
        return Find(arguments)

    def _parse_sort(self, arguments: str) -> Command:
        if arguments and arguments != REVERSE_FLAG:
            raise InvalidInputError(f"'sort' only accepts '{REVERSE_FLAG}', got '{arguments}'")
        return Sort(reverse=arguments == REVERSE_FLAG)


def parse_command(line: str) -> Command:
    """Parse one line of input with a fresh ``CommandParser``."""
    return CommandParser().parse(line)
