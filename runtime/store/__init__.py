"""
Storage abstractions for the todo-list runtime.

Includes:
- SessionPersistence: list / todo CRUD over the session bag
"""
