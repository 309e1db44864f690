# validation/validators.py
"""
Name and text rules for lists and todos.

Two flavours are exposed for each rule:

- error_for_*: pure checks returning an error message, or None when the
  input is valid.
- validate_*: the same checks, raising ValidationError (with the raw input
  attached) instead of returning the message.

Neither flavour touches the session; the caller runs them before any
repository mutation.
"""

from __future__ import annotations

from typing import Iterable, Optional

from exceptions.exceptions import ValidationError


MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100


def _length_ok(value: str) -> bool:
    return MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH


def error_for_list_name(name: str, existing_lists: Iterable) -> Optional[str]:
    """Return an error message if the list name is invalid, else None.

    ``existing_lists`` holds the lists the name must not collide with.
    The comparison is an exact, case-sensitive match.
    """
    if not _length_ok(name):
        return f"List name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
    if any(todo_list.name == name for todo_list in existing_lists):
        return "List name must be unique."
    return None


def error_for_todo(text: str) -> Optional[str]:
    """Return an error message if the todo text is invalid, else None."""
    if not _length_ok(text):
        return f"Todo must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
    return None


def validate_list_name(name: str, existing_lists: Iterable) -> None:
    error = error_for_list_name(name, existing_lists)
    if error:
        raise ValidationError(error, value=name)


def validate_todo_text(text: str) -> None:
    error = error_for_todo(text)
    if error:
        raise ValidationError(error, value=text)
