"""Tests for the command parser."""

from datetime import date, datetime, time

import pytest

from taskpal.commands import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Bye,
    Delete,
    Done,
    FilterByDate,
    Find,
    ListTasks,
    Sort,
)
from taskpal.exceptions import DateTimeParseError, InvalidInputError, InvalidInstructionError
from taskpal.parser import CommandParser, parse_command, suggest_keywords


class TestCommandParser:
    """Test parsing of every command kind."""

    def setup_method(self):
        self.parser = CommandParser()

    def test_bye_and_list(self):
        assert self.parser.parse("bye") == Bye()
        assert self.parser.parse("list") == ListTasks()
        assert self.parser.parse("  list  ") == ListTasks()

    def test_done_and_delete(self):
        assert self.parser.parse("done 2") == Done(2)
        assert self.parser.parse("delete 10") == Delete(10)

    def test_todo(self):
        command = self.parser.parse("todo read book")

        assert command == AddToDo("read book")
        assert command.as_dict() == {"cmd": "todo", "details": "read book"}

    def test_deadline(self):
        command = self.parser.parse("deadline submit report /by 2024-12-01 1800")

        assert command == AddDeadline("submit report", datetime(2024, 12, 1, 18, 0))
        assert command.as_dict() == {
            "cmd": "deadline",
            "details": "submit report",
            "deadline": "2024-12-01 1800",
        }

    def test_event(self):
        command = self.parser.parse("event book club /at 2024-12-01 1900-2100")

        assert command == AddEvent("book club", datetime(2024, 12, 1, 19, 0), time(21, 0))
        assert command.as_dict()["timing"] == "2024-12-01 1900-2100"

    def test_date(self):
        command = self.parser.parse("date 2024-12-01")

        assert command == FilterByDate(date(2024, 12, 1))
        assert set(command.as_dict()) == {"cmd", "date"}

    def test_find_keeps_spaces(self):
        assert self.parser.parse("find read book") == Find("read book")

    def test_sort(self):
        assert self.parser.parse("sort") == Sort(reverse=False)
        assert self.parser.parse("sort reverse") == Sort(reverse=True)
        assert self.parser.parse("sort reverse").as_dict() == {"cmd": "sort", "reverse": True}

    def test_parse_command_helper(self):
        assert parse_command("todo x") == AddToDo("x")


class TestCommandDicts:
    """Test the keys and value types of every command's dictionary form."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("bye", {"cmd": str}),
            ("list", {"cmd": str}),
            ("done 2", {"cmd": str, "index": int}),
            ("delete 3", {"cmd": str, "index": int}),
            ("todo read book", {"cmd": str, "details": str}),
            ("deadline submit /by 2024-12-01 1800", {"cmd": str, "details": str, "deadline": str}),
            ("event party /at 2024-12-01 1800-2000", {"cmd": str, "details": str, "timing": str}),
            ("date 2024-12-01", {"cmd": str, "date": date}),
            ("find book", {"cmd": str, "keyword": str}),
            ("sort reverse", {"cmd": str, "reverse": bool}),
        ],
    )
    def test_keys_and_value_types(self, line, expected):
        data = parse_command(line).as_dict()

        assert set(data) == set(expected)
        assert data["cmd"] == line.split(" ")[0]
        for key, value_type in expected.items():
            assert isinstance(data[key], value_type), key


class TestCommandParserErrors:
    """Test rejection of malformed input."""

    def setup_method(self):
        self.parser = CommandParser()

    @pytest.mark.parametrize("line", ["done", "done two", "delete", "delete 1.5", "done 0", "delete -3"])
    def test_bad_task_number(self, line):
        with pytest.raises(InvalidInputError):
            self.parser.parse(line)

    @pytest.mark.parametrize("line", ["todo", "todo   ", "deadline /by 2024-12-01 1800", "event /at 2024-12-01 1800-1900"])
    def test_empty_description(self, line):
        with pytest.raises(InvalidInputError, match="cannot be empty"):
            self.parser.parse(line)

    def test_deadline_without_by(self):
        with pytest.raises(InvalidInputError, match="/by"):
            self.parser.parse("deadline submit report")

    def test_event_without_at(self):
        with pytest.raises(InvalidInputError, match="/at"):
            self.parser.parse("event party 2024-12-01 1800-2000")

    def test_event_without_end_time(self):
        with pytest.raises(DateTimeParseError) as exc_info:
            self.parser.parse("event party /at 2024-12-01 1800")

        assert exc_info.value.text == "2024-12-01 1800"
        assert exc_info.value.position == 15

    @pytest.mark.parametrize("line", ["todo a\nT done", "todo a\rb", "deadline x\n/by 2024-12-01 1800"])
    def test_multi_line_input(self, line):
        with pytest.raises(InvalidInputError, match="one command per line"):
            self.parser.parse(line)

    def test_bad_date_time_has_position(self):
        with pytest.raises(DateTimeParseError) as exc_info:
            self.parser.parse("deadline submit report /by 2024-12-01 18:00")

        assert exc_info.value.text == "2024-12-01 18:00"
        assert exc_info.value.position == 13

    def test_bad_date(self):
        with pytest.raises(DateTimeParseError):
            self.parser.parse("date 1st December")
        with pytest.raises(InvalidInputError):
            self.parser.parse("date")

    def test_find_without_keyword(self):
        with pytest.raises(InvalidInputError):
            self.parser.parse("find")

    def test_sort_with_unknown_argument(self):
        with pytest.raises(InvalidInputError):
            self.parser.parse("sort backwards")

    def test_list_with_arguments(self):
        with pytest.raises(InvalidInputError):
            self.parser.parse("list all")

    def test_unknown_keyword(self):
        with pytest.raises(InvalidInstructionError) as exc_info:
            self.parser.parse("blah blah")

        assert exc_info.value.keyword == "blah"

    def test_keywords_are_case_sensitive(self):
        with pytest.raises(InvalidInstructionError) as exc_info:
            self.parser.parse("LIST")

        assert exc_info.value.keyword == "LIST"
        assert "list" in exc_info.value.suggestions

    def test_suggestions_for_typos(self):
        assert suggest_keywords("dealine")[0] == "deadline"
        assert suggest_keywords("") == []
