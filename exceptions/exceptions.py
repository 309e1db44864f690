"""
Custom exceptions for the todo-list manager.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/validation/
  - runtime/store/
  - runtime/api/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""


class TodoAppError(Exception):
    """Base class for every error raised by the todo-list manager."""


class ValidationError(TodoAppError):
    """
    Raised when a list name or todo text breaks a naming rule
    (length outside 1..100, or a duplicate list name).

    The raw user input is kept on the exception so the form can be
    re-rendered with it.
    """

    def __init__(self, message, value=None):
        self.message = message
        self.value = value
        super().__init__(message)


class NotFoundError(TodoAppError):
    """Raised when a list or todo id is not present in the session."""


class ListNotFoundError(NotFoundError):
    """
    Raised when an operation needs a list that does not exist.

    The exception contains the requested list id.
    """

    def __init__(self, list_id):
        self.list_id = list_id
        super().__init__(f"List not found: {list_id}")


class TodoNotFoundError(NotFoundError):
    """
    Raised when an operation needs a todo that does not exist in its list.

    The exception contains both the list id and the todo id.
    """

    def __init__(self, list_id, todo_id):
        self.list_id = list_id
        self.todo_id = todo_id
        super().__init__(f"Todo not found: list_id={list_id} todo_id={todo_id}")
