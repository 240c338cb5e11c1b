"""Models for the lists and todos kept in the session."""

from typing import List

from pydantic import BaseModel
from pydantic import Field


class Todo(BaseModel):
    """A single item within a list."""

    name: str
    completed: bool = False


class TodoList(BaseModel):
    """A named, ordered collection of todos."""

    name: str
    todos: List[Todo] = Field(default_factory=list)

    def __repr__(self):
        return f"<TodoList(name={self.name!r}, todos={len(self.todos)})>"
