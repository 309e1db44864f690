"""
FastAPI application entry point for the todo-list manager.

Responsibilities:
- create the FastAPI app
- install the signed-cookie session middleware that holds every user's lists
- construct the shared Jinja2 templates (with the view helpers registered)
- include the list/todo routes
"""

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from configs.settings import settings
from runtime.views.helpers import TEMPLATE_GLOBALS
from . import list_routes


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Templates autoescape .html files, so user-entered names are rendered safely.
templates = Jinja2Templates(directory=str(settings.templates_dir))
templates.env.globals.update(TEMPLATE_GLOBALS)

# ---------------------------------------------------------------------------
# FastAPI app + route registration
# ---------------------------------------------------------------------------

app = FastAPI(title="Todo Lists")

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
)

# Initialize the router module with our shared objects, then include it.
list_routes.init_routes(templates=templates)
app.include_router(list_routes.router)
