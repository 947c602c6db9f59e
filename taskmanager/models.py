from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Category:
    """A label such as "Work" or "University". Identity is the id alone."""

    id: int
    name: Optional[str]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Category):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Category{{id={self.id}, name={self.name}}}"


@dataclass(eq=False)
class Task:
    """
    A single TODO item.

    `category` points at the Category object owned by the category
    repository; it is never copied, and is reset to None when that
    category is deleted.
    """

    id: int
    title: Optional[str]
    description: Optional[str]
    category: Optional[Category]
    done: bool = False

    @property
    def category_id(self) -> Optional[int]:
        return self.category.id if self.category is not None else None

    def mark_done(self) -> None:
        self.done = True

    def mark_pending(self) -> None:
        self.done = False

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"Task{{id={self.id}, title={self.title}, "
            f"category={self.category}, done={self.done}}}"
        )
