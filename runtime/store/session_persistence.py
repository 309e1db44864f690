"""Session-backed storage for todo lists.

All state lives in the caller's session bag (for HTTP requests this is
Starlette's ``request.session``). The layout of the bag is:

    {
      "lists": [ {"id": 1, "name": "Groceries", "todos": [...]}, ... ],
      "error": "...",      # optional one-shot notice
      "success": "..."     # optional one-shot notice
    }

The design is intentionally simple:
- The bag only ever holds plain dicts so that the session mechanism can
  serialize it.
- Reads turn those dicts into TodoList / Todo models.
- Every mutation writes the full serialized collection back into the bag
  before returning.
"""

import logging
from typing import Any, Iterable, List, MutableMapping, Optional, Tuple

from exceptions.exceptions import ListNotFoundError, TodoNotFoundError
from ..models.list_models import Todo, TodoList


logger = logging.getLogger(__name__)

LISTS_KEY = "lists"
ERROR_KEY = "error"
SUCCESS_KEY = "success"


def next_element_id(elements: Iterable[Any]) -> int:
    """Return one more than the highest ``id`` in ``elements``, or 1 if empty."""
    return max((element.id for element in elements), default=0) + 1


class SessionPersistence:
    """CRUD access to the lists stored in a session bag.

    Parameters
    ----------
    session:
        Mutable mapping owned by the caller. ``lists`` is initialised to an
        empty list only when it is missing, so building several
        SessionPersistence objects over the same bag is safe.
    """

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session
        self._session.setdefault(LISTS_KEY, [])

    # ------------------------------------------------------------------
    # Serialization boundary
    # ------------------------------------------------------------------

    @property
    def lists(self) -> List[TodoList]:
        return [TodoList.model_validate(data) for data in self._session[LISTS_KEY]]

    def _save(self, lists: List[TodoList]) -> None:
        self._session[LISTS_KEY] = [todo_list.model_dump() for todo_list in lists]

    def _require_list(self, lists: List[TodoList], list_id: int) -> TodoList:
        todo_list = next((l for l in lists if l.id == list_id), None)
        if todo_list is None:
            raise ListNotFoundError(list_id)
        return todo_list

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_list(self, list_id: int) -> Optional[TodoList]:
        return next((l for l in self.lists if l.id == list_id), None)

    def list_name_taken(self, name: str) -> bool:
        return any(l.name == name for l in self.lists)

    # ------------------------------------------------------------------
    # List mutations
    # ------------------------------------------------------------------

    def create_new_list(self, name: str) -> TodoList:
        lists = self.lists
        todo_list = TodoList(id=next_element_id(lists), name=name)
        lists.append(todo_list)
        self._save(lists)
        logger.debug("[STORE] created list id=%s name=%r", todo_list.id, name)
        return todo_list

    def change_list_name(self, list_id: int, name: str) -> None:
        lists = self.lists
        self._require_list(lists, list_id).name = name
        self._save(lists)
        logger.debug("[STORE] renamed list id=%s to %r", list_id, name)

    def delete_list(self, list_id: int) -> None:
        lists = self.lists
        self._save([l for l in lists if l.id != list_id])
        logger.debug("[STORE] deleted list id=%s", list_id)

    def complete_all_todos(self, list_id: int) -> None:
        lists = self.lists
        for todo in self._require_list(lists, list_id).todos:
            todo.completed = True
        self._save(lists)
        logger.debug("[STORE] completed all todos in list id=%s", list_id)

    # ------------------------------------------------------------------
    # Todo mutations
    # ------------------------------------------------------------------

    def create_new_todo(self, list_id: int, text: str) -> Todo:
        lists = self.lists
        todo_list = self._require_list(lists, list_id)
        todo = Todo(id=next_element_id(todo_list.todos), name=text)
        todo_list.todos.append(todo)
        self._save(lists)
        logger.debug("[STORE] created todo id=%s in list id=%s", todo.id, list_id)
        return todo

    def delete_todo(self, list_id: int, todo_id: int) -> None:
        lists = self.lists
        todo_list = next((l for l in lists if l.id == list_id), None)
        if todo_list is None:
            return
        todo_list.todos = [t for t in todo_list.todos if t.id != todo_id]
        self._save(lists)
        logger.debug("[STORE] deleted todo id=%s from list id=%s", todo_id, list_id)

    def update_todo(self, list_id: int, todo_id: int, completed: bool) -> None:
        lists = self.lists
        todo = self._require_list(lists, list_id).find_todo(todo_id)
        if todo is None:
            raise TodoNotFoundError(list_id, todo_id)
        todo.completed = completed
        self._save(lists)
        logger.debug(
            "[STORE] set completed=%s on todo id=%s in list id=%s",
            completed,
            todo_id,
            list_id,
        )

    # ------------------------------------------------------------------
    # One-shot notices
    # ------------------------------------------------------------------

    @property
    def error(self) -> Optional[str]:
        return self._session.get(ERROR_KEY)

    @error.setter
    def error(self, message: str) -> None:
        self._session[ERROR_KEY] = message

    @property
    def success(self) -> Optional[str]:
        return self._session.get(SUCCESS_KEY)

    @success.setter
    def success(self, message: str) -> None:
        self._session[SUCCESS_KEY] = message

    def pop_notices(self) -> Tuple[Optional[str], Optional[str]]:
        """Return ``(error, success)`` and clear both from the bag."""
        return self._session.pop(ERROR_KEY, None), self._session.pop(SUCCESS_KEY, None)
