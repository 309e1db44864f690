"""Unit tests for list name / todo text validation."""
import pytest

from core.validation.validators import (
    error_for_list_name,
    error_for_todo,
    validate_list_name,
    validate_todo_text,
)
from exceptions.exceptions import ValidationError
from runtime.models.list_models import TodoList


LENGTH_ERROR = "List name must be between 1 and 100 characters."
UNIQUE_ERROR = "List name must be unique."
TODO_ERROR = "Todo must be between 1 and 100 characters."


@pytest.mark.parametrize("length", [1, 100])
def test_list_name_length_accepted(length):
    assert error_for_list_name("x" * length, []) is None


@pytest.mark.parametrize("length", [0, 101])
def test_list_name_length_rejected(length):
    assert error_for_list_name("x" * length, []) == LENGTH_ERROR


def test_duplicate_list_name_rejected():
    existing = [TodoList(id=1, name="Work")]
    assert error_for_list_name("Work", existing) == UNIQUE_ERROR


def test_uniqueness_is_case_sensitive():
    existing = [TodoList(id=1, name="Work")]
    assert error_for_list_name("work", existing) is None


def test_length_checked_before_uniqueness():
    existing = [TodoList(id=1, name="")]
    assert error_for_list_name("", existing) == LENGTH_ERROR


@pytest.mark.parametrize("length", [1, 100])
def test_todo_length_accepted(length):
    assert error_for_todo("x" * length) is None


@pytest.mark.parametrize("length", [0, 101])
def test_todo_length_rejected(length):
    assert error_for_todo("x" * length) == TODO_ERROR


def test_validate_list_name_raises_with_input():
    with pytest.raises(ValidationError) as exc_info:
        validate_list_name("Work", [TodoList(id=1, name="Work")])
    assert exc_info.value.message == UNIQUE_ERROR
    assert exc_info.value.value == "Work"


def test_validate_todo_text_raises_with_input():
    with pytest.raises(ValidationError) as exc_info:
        validate_todo_text("x" * 101)
    assert exc_info.value.message == TODO_ERROR
    assert exc_info.value.value == "x" * 101


def test_validate_passes_silently():
    validate_list_name("Work", [])
    validate_todo_text("buy milk")


def test_duplicate_create_rejected_and_count_unchanged(storage):
    validate_list_name("Work", storage.lists)
    storage.create_new_list("Work")

    with pytest.raises(ValidationError):
        validate_list_name("Work", storage.lists)
    assert len(storage.lists) == 1
