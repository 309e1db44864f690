"""Template helpers for rendering lists and todos.

Registered as Jinja2 globals by runtime.api.server so templates can call
them directly, e.g. ``{% for todo in sort_todos(todo_list.todos) %}``.
"""

from typing import List, Optional

from ..models.list_models import Todo, TodoList


def list_complete(todo_list: TodoList) -> bool:
    return todo_list.is_complete


def list_class(todo_list: TodoList) -> Optional[str]:
    """CSS class for a list row: "complete" when every todo is done."""
    return "complete" if todo_list.is_complete else None


def todos_count(todo_list: TodoList) -> int:
    return todo_list.todos_count


def todos_remaining_count(todo_list: TodoList) -> int:
    return todo_list.todos_remaining_count


def sort_lists(lists: List[TodoList]) -> List[TodoList]:
    """Incomplete lists first, then complete ones; order kept inside each group."""
    incomplete = [l for l in lists if not l.is_complete]
    complete = [l for l in lists if l.is_complete]
    return incomplete + complete


def sort_todos(todos: List[Todo]) -> List[Todo]:
    """Open todos first, then completed ones; order kept inside each group."""
    incomplete = [t for t in todos if not t.completed]
    complete = [t for t in todos if t.completed]
    return incomplete + complete


TEMPLATE_GLOBALS = {
    "list_complete": list_complete,
    "list_class": list_class,
    "todos_count": todos_count,
    "todos_remaining_count": todos_remaining_count,
    "sort_lists": sort_lists,
    "sort_todos": sort_todos,
}
