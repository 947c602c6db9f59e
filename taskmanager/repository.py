from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from .models import Category, Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Repository(Generic[T]):
    """
    In-memory store keyed by an autoincrement integer id.

    `factory(id, *fields)` builds a new entity; `search_key(entity)` returns
    the text that `find_by_text` matches against. Repositories know nothing
    about business rules, only about existence.
    """

    def __init__(
        self,
        factory: Callable[..., T],
        search_key: Callable[[T], Optional[str]],
    ) -> None:
        self._factory = factory
        self._search_key = search_key
        self._items: Dict[int, T] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._items)

    def create(self, *fields: object) -> T:
        item_id = self._next_id
        item = self._factory(item_id, *fields)
        self._items[item_id] = item
        self._next_id += 1
        logger.debug("%s created id=%s", type(self).__name__, item_id)
        return item

    def find_all(self) -> List[T]:
        return list(self._items.values())

    def find_by_id(self, item_id: int) -> Optional[T]:
        return self._items.get(item_id)

    def find_by_text(self, text: Optional[str]) -> List[T]:
        """
        Case-insensitive substring search on the entity's text field.
        None or "" returns an empty list, not every entity.
        """
        if not text:
            return []
        needle = text.lower()
        out: List[T] = []
        for item in self._items.values():
            key = self._search_key(item)
            if key is not None and needle in key.lower():
                out.append(item)
        return out

    def delete_by_id(self, item_id: int) -> bool:
        removed = self._items.pop(item_id, None) is not None
        if removed:
            logger.debug("%s deleted id=%s", type(self).__name__, item_id)
        return removed

    def clear(self) -> None:
        self._items.clear()
        self._next_id = 1
        logger.debug("%s cleared", type(self).__name__)


class TaskRepository(Repository[Task]):
    def __init__(self) -> None:
        super().__init__(Task, lambda t: t.title)

    def create(  # type: ignore[override]
        self,
        title: Optional[str],
        description: Optional[str],
        category: Optional[Category],
    ) -> Task:
        return super().create(title, description, category)

    def find_by_title(self, text: Optional[str]) -> List[Task]:
        return self.find_by_text(text)


class CategoryRepository(Repository[Category]):
    def __init__(self) -> None:
        super().__init__(Category, lambda c: c.name)

    def create(self, name: Optional[str]) -> Category:  # type: ignore[override]
        return super().create(name)

    def find_by_name(self, text: Optional[str]) -> List[Category]:
        return self.find_by_text(text)

    def exists_by_name(self, name: str) -> bool:
        """Case-insensitive exact match against stored category names."""
        wanted = name.lower()
        return any(
            c.name is not None and c.name.lower() == wanted
            for c in self._items.values()
        )
