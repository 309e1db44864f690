"""Unit tests for the template helpers."""
from runtime.models.list_models import Todo, TodoList
from runtime.views.helpers import (
    list_class,
    list_complete,
    sort_lists,
    sort_todos,
    todos_count,
    todos_remaining_count,
)


def _list(list_id, *completed):
    todos = [Todo(id=i + 1, name=f"t{i}", completed=c) for i, c in enumerate(completed)]
    return TodoList(id=list_id, name=f"list {list_id}", todos=todos)


def test_counts():
    todo_list = _list(1, False, True, False)
    assert todos_count(todo_list) == 3
    assert todos_remaining_count(todo_list) == 2


def test_empty_list_is_not_complete():
    todo_list = _list(1)
    assert not list_complete(todo_list)
    assert list_class(todo_list) is None


def test_all_done_list_is_complete():
    todo_list = _list(1, True, True)
    assert list_complete(todo_list)
    assert list_class(todo_list) == "complete"


def test_sort_lists_puts_complete_last():
    done = _list(1, True)
    empty = _list(2)
    open_ = _list(3, False)

    assert [l.id for l in sort_lists([done, empty, open_])] == [2, 3, 1]


def test_sort_todos_puts_completed_last():
    todos = _list(1, True, False, True, False).todos
    assert [t.id for t in sort_todos(todos)] == [2, 4, 1, 3]
