"""HTTP routes for managing todo lists.

Exposes endpoints like:

- GET  /lists                               -> index of all lists
- POST /lists                               -> create a list (form: list_name)
- GET  /lists/{id}                          -> a single list with its todos
- POST /lists/{id}                          -> rename a list (form: list_name)
- POST /lists/{id}/destroy                  -> delete a list
- POST /lists/{list_id}/todos               -> add a todo (form: todo)
- POST /lists/{list_id}/todos/{id}          -> set completion (form: completed)
- POST /lists/{list_id}/todos/{id}/destroy  -> delete a todo
- POST /lists/{id}/complete_all             -> complete every todo in a list

Every handler builds a fresh SessionPersistence over ``request.session``.
"""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from typing import Optional

from core.validation.validators import validate_list_name, validate_todo_text
from exceptions.exceptions import (
    ListNotFoundError,
    NotFoundError,
    TodoNotFoundError,
    ValidationError,
)
from ..store.session_persistence import SessionPersistence


logger = logging.getLogger(__name__)

# Router for all list-related endpoints
router = APIRouter()

LIST_NOT_FOUND = "The specified list was not found."
TODO_NOT_FOUND = "The specified todo was not found."


# Module-level references, to be initialized by the server.
_TEMPLATES: Optional[Jinja2Templates] = None


def init_routes(templates: Jinja2Templates) -> None:
    """Initialize module-level references used by the route handlers."""
    global _TEMPLATES
    _TEMPLATES = templates


def _require_templates() -> Jinja2Templates:
    if _TEMPLATES is None:
        raise HTTPException(
            status_code=500,
            detail="Templates are not configured on the server.",
        )
    return _TEMPLATES


def get_storage(request: Request) -> SessionPersistence:
    return SessionPersistence(request.session)


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------


def _render(
    request: Request,
    storage: SessionPersistence,
    template: str,
    context: Optional[dict] = None,
    status_code: int = 200,
) -> Response:
    """Render ``template``, consuming any pending notices from the session."""
    error, success = storage.pop_notices()
    full_context = {"error": error, "success": success}
    full_context.update(context or {})
    return _require_templates().TemplateResponse(
        request, template, full_context, status_code=status_code
    )


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=303)


def _is_xhr(request: Request) -> bool:
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


def _not_found(storage: SessionPersistence, exc: NotFoundError) -> RedirectResponse:
    """Redirect away from a missing list / todo with an error notice."""
    logger.warning("[LISTS] %s", exc)
    if isinstance(exc, TodoNotFoundError):
        storage.error = TODO_NOT_FOUND
        return _redirect(f"/lists/{exc.list_id}")
    storage.error = LIST_NOT_FOUND
    return _redirect("/lists")


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


@router.get("/")
def root():
    return _redirect("/lists")


@router.get("/lists")
def index(request: Request, storage: SessionPersistence = Depends(get_storage)):
    """View the list of lists."""
    return _render(request, storage, "lists.html", {"lists": storage.lists})


@router.get("/lists/new")
def new_list(request: Request, storage: SessionPersistence = Depends(get_storage)):
    """Render the new list form."""
    return _render(request, storage, "new_list.html", {"list_name": ""})


@router.post("/lists")
def create_list(
    request: Request,
    list_name: str = Form(""),
    storage: SessionPersistence = Depends(get_storage),
):
    """Create a new list."""
    list_name = list_name.strip()

    try:
        validate_list_name(list_name, storage.lists)
    except ValidationError as e:
        logger.warning("[LISTS] rejected new list name=%r reason=%r", e.value, e.message)
        storage.error = e.message
        return _render(
            request, storage, "new_list.html", {"list_name": e.value}, status_code=422
        )

    storage.create_new_list(list_name)
    storage.success = "The list has been created."
    return _redirect("/lists")


@router.get("/lists/{list_id}")
def show_list(
    request: Request,
    list_id: int,
    storage: SessionPersistence = Depends(get_storage),
):
    """View a single todo list."""
    todo_list = storage.get_list(list_id)
    if todo_list is None:
        return _not_found(storage, ListNotFoundError(list_id))
    return _render(request, storage, "list.html", {"todo_list": todo_list, "todo": ""})


@router.get("/lists/{list_id}/edit")
def edit_list(
    request: Request,
    list_id: int,
    storage: SessionPersistence = Depends(get_storage),
):
    """Render the rename form for an existing list."""
    todo_list = storage.get_list(list_id)
    if todo_list is None:
        return _not_found(storage, ListNotFoundError(list_id))
    return _render(
        request,
        storage,
        "edit_list.html",
        {"todo_list": todo_list, "list_name": todo_list.name},
    )


@router.post("/lists/{list_id}")
def update_list(
    request: Request,
    list_id: int,
    list_name: str = Form(""),
    storage: SessionPersistence = Depends(get_storage),
):
    """Rename an existing list."""
    list_name = list_name.strip()
    todo_list = storage.get_list(list_id)
    if todo_list is None:
        return _not_found(storage, ListNotFoundError(list_id))

    # A list may keep its own name; uniqueness is against the other lists.
    others = [l for l in storage.lists if l.id != list_id]
    try:
        validate_list_name(list_name, others)
    except ValidationError as e:
        logger.warning(
            "[LISTS] rejected rename list_id=%s name=%r reason=%r",
            list_id,
            e.value,
            e.message,
        )
        storage.error = e.message
        return _render(
            request,
            storage,
            "edit_list.html",
            {"todo_list": todo_list, "list_name": e.value},
            status_code=422,
        )

    storage.change_list_name(list_id, list_name)
    storage.success = "The list has been updated."
    return _redirect(f"/lists/{list_id}")


@router.post("/lists/{list_id}/destroy")
def destroy_list(
    request: Request,
    list_id: int,
    storage: SessionPersistence = Depends(get_storage),
):
    """Delete a list. AJAX callers get the redirect target as the body."""
    storage.delete_list(list_id)
    storage.success = "The list has been deleted."
    if _is_xhr(request):
        return PlainTextResponse("/lists")
    return _redirect("/lists")


@router.post("/lists/{list_id}/complete_all")
def complete_all(
    list_id: int,
    storage: SessionPersistence = Depends(get_storage),
):
    """Mark every todo in a list as complete."""
    try:
        storage.complete_all_todos(list_id)
    except NotFoundError as e:
        return _not_found(storage, e)

    storage.success = "All todos have been completed."
    return _redirect(f"/lists/{list_id}")


# ---------------------------------------------------------------------------
# Todos
# ---------------------------------------------------------------------------


@router.post("/lists/{list_id}/todos")
def create_todo(
    request: Request,
    list_id: int,
    todo: str = Form(""),
    storage: SessionPersistence = Depends(get_storage),
):
    """Add a new todo to a list."""
    text = todo.strip()
    todo_list = storage.get_list(list_id)
    if todo_list is None:
        return _not_found(storage, ListNotFoundError(list_id))

    try:
        validate_todo_text(text)
    except ValidationError as e:
        logger.warning(
            "[LISTS] rejected todo for list_id=%s text=%r reason=%r",
            list_id,
            e.value,
            e.message,
        )
        storage.error = e.message
        return _render(
            request,
            storage,
            "list.html",
            {"todo_list": todo_list, "todo": e.value},
            status_code=422,
        )

    storage.create_new_todo(list_id, text)
    storage.success = "The todo was added."
    return _redirect(f"/lists/{list_id}")


@router.post("/lists/{list_id}/todos/{todo_id}/destroy")
def destroy_todo(
    request: Request,
    list_id: int,
    todo_id: int,
    storage: SessionPersistence = Depends(get_storage),
):
    """Delete a todo. AJAX callers get an empty 204 response."""
    storage.delete_todo(list_id, todo_id)

    if _is_xhr(request):
        return Response(status_code=204)
    storage.success = "The todo has been deleted."
    return _redirect(f"/lists/{list_id}")


@router.post("/lists/{list_id}/todos/{todo_id}")
def update_todo(
    list_id: int,
    todo_id: int,
    completed: str = Form(""),
    storage: SessionPersistence = Depends(get_storage),
):
    """Update the completion state of a todo."""
    try:
        storage.update_todo(list_id, todo_id, completed == "true")
    except NotFoundError as e:
        return _not_found(storage, e)

    storage.success = "The todo has been updated."
    return _redirect(f"/lists/{list_id}")


# --------------------------------------------------------
# Endpoint: GET /healthz
# --------------------------------------------------------
@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
