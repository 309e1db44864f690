"""
Pydantic datamodels used by the todo-list runtime.

- list_models: TodoList + Todo
"""
