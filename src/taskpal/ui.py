"""Reply messages shown to the user."""

from datetime import date

from .task import Task
from .utils.datetime import display_date


class Ui:
    """Builds the text of every reply the assistant gives."""

    def greeting(self) -> str:
        return "Hello! I'm taskpal.\nWhat can I do for you?"

    def farewell(self) -> str:
        return "Bye. Hope to see you again soon!"

    def list_message(self, size: int) -> str:
        if size == 0:
            return "Your task list is empty."
        return "Here are the tasks in your list:"

    def _count(self, size: int) -> str:
        noun = "task" if size == 1 else "tasks"
        return f"Now you have {size} {noun} in the list."

    def add_task_message(self, task: Task, size: int) -> str:
        return f"Got it. I've added this task:\n  {task}\n{self._count(size)}"

    def done_message(self, task: Task) -> str:
        return f"Nice! I've marked this task as done:\n  {task}"

    def delete_message(self, task: Task, size: int) -> str:
        return f"Noted. I've removed this task:\n  {task}\n{self._count(size)}"

    def matching_date(self, day: date) -> str:
        return f"Here are the tasks on {display_date(day)}:"

    def matching_keyword(self, keyword: str) -> str:
        return f"Here are the tasks matching '{keyword}':"

    def sort_message(self, reverse: bool) -> str:
        order = "reverse alphabetical" if reverse else "alphabetical"
        return f"I've sorted your tasks in {order} order."

    def error_message(self, error: Exception, hint: str = "") -> str:
        message = f"OOPS!!! {error}"
        if hint:
            message += f"\n{hint}"
        return message
