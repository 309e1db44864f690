"""
List / todo models for the todo-list manager.

These describe:
- a Todo item (id, name, completed)
- a TodoList owning an ordered list of Todos

Both are stored in the session bag as plain dicts; see
runtime.store.session_persistence for the conversion boundary.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class Todo(BaseModel):
    id: int
    name: str
    completed: bool = False


class TodoList(BaseModel):
    id: int
    name: str
    todos: List[Todo] = Field(default_factory=list)

    @property
    def todos_count(self) -> int:
        return len(self.todos)

    @property
    def todos_remaining_count(self) -> int:
        return sum(1 for todo in self.todos if not todo.completed)

    @property
    def is_complete(self) -> bool:
        """A list is complete when it has todos and none are left open."""
        return self.todos_count > 0 and self.todos_remaining_count == 0

    def find_todo(self, todo_id: int) -> Optional[Todo]:
        return next((todo for todo in self.todos if todo.id == todo_id), None)
