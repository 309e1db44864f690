"""
Runtime package for the todo-list web server.

This package contains:
- API layer (FastAPI server + routes)
- Stores (session-backed list / todo persistence)
- Models (Pydantic models for lists and todos)
- Views (template helpers + Jinja2 templates)
"""
