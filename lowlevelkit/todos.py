"""In-memory to-do list whose tasks get sequential identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class TodoTask:
    """One entry of a to-do list."""

    id: int
    title: str
    description: str

    def to_json(self) -> str:
        """Render the task as a compact JSON object, fields taken verbatim."""
        return (
            f'{{"id":{self.id},"title":"{self.title}",'
            f'"description":"{self.description}"}}'
        )


@dataclass
class TodoList:
    """Ordered collection of tasks; identifiers count up from zero."""

    tasks: list[TodoTask] = field(default_factory=list)

    def add(self, title: str, description: str) -> TodoTask:
        """Append a new task and return it."""
        if title is None or description is None:
            raise ValueError("a task needs both a title and a description")
        task = TodoTask(len(self.tasks), title, description)
        self.tasks.append(task)
        return task

    def last(self) -> TodoTask | None:
        """Return the most recently added task, or None if the list is empty."""
        return self.tasks[-1] if self.tasks else None

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[TodoTask]:
        return iter(self.tasks)