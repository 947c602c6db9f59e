from __future__ import annotations

import logging
from typing import List, Optional

from .models import Category, Task
from .repository import CategoryRepository, TaskRepository

logger = logging.getLogger(__name__)


class Application:
    """
    Coordinates the category and task repositories.

    Callers (the CLI or any other front end) talk to this class only.
    Every precondition failure comes back as None / False / [] and is
    never raised; the reason is logged at INFO.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        task_repository: TaskRepository,
    ) -> None:
        self.category_repository = category_repository
        self.task_repository = task_repository

    @classmethod
    def create_default(cls) -> "Application":
        """Application over fresh, empty repositories."""
        return cls(CategoryRepository(), TaskRepository())

    # ---- categories ----

    def create_category(self, name: Optional[str]) -> Optional[Category]:
        if name is None or not name.strip():
            logger.info("create_category rejected: blank name")
            return None
        clean = name.strip()
        if self.category_repository.exists_by_name(clean):
            logger.info("create_category rejected: duplicate name %r", clean)
            return None
        category = self.category_repository.create(clean)
        logger.info("Created %s", category)
        return category

    def list_categories(self) -> List[Category]:
        return self.category_repository.find_all()

    def search_categories_by_name(self, text: Optional[str]) -> List[Category]:
        return self.category_repository.find_by_name(text)

    def rename_category(self, category_id: int, new_name: Optional[str]) -> bool:
        # Name is not re-validated here; only creation checks blank/duplicate.
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            logger.info("rename_category: category #%s not found", category_id)
            return False
        category.name = new_name
        return True

    def delete_category(self, category_id: int) -> bool:
        if not self.category_repository.delete_by_id(category_id):
            logger.info("delete_category: category #%s not found", category_id)
            return False

        orphaned = 0
        for task in self.task_repository.find_all():
            if task.category is not None and task.category.id == category_id:
                task.category = None
                orphaned += 1

        logger.info(
            "Deleted category #%s, detached %d task(s)", category_id, orphaned
        )
        return True

    # ---- tasks ----

    def create_task(
        self,
        title: Optional[str],
        description: Optional[str],
        category_id: int,
    ) -> Optional[Task]:
        if title is None or not title.strip():
            logger.info("create_task rejected: blank title")
            return None

        category = self.category_repository.find_by_id(category_id)
        if category is None:
            logger.info("create_task rejected: category #%s not found", category_id)
            return None

        safe_description = "" if description is None else description.strip()
        task = self.task_repository.create(title.strip(), safe_description, category)
        logger.info("Created %s", task)
        return task

    def list_tasks(self) -> List[Task]:
        return self.task_repository.find_all()

    def search_tasks_by_title(self, text: Optional[str]) -> List[Task]:
        return self.task_repository.find_by_title(text)

    def list_tasks_by_category(self, category_id: int) -> List[Task]:
        return [
            t
            for t in self.task_repository.find_all()
            if t.category is not None and t.category.id == category_id
        ]

    def list_tasks_by_done_status(self, done: bool) -> List[Task]:
        return [t for t in self.task_repository.find_all() if t.done == done]

    def _find_task(self, task_id: int, action: str) -> Optional[Task]:
        task = self.task_repository.find_by_id(task_id)
        if task is None:
            logger.info("%s: task #%s not found", action, task_id)
        return task

    def update_task_title(self, task_id: int, new_title: Optional[str]) -> bool:
        task = self._find_task(task_id, "update_task_title")
        if task is None:
            return False
        task.title = new_title
        return True

    def update_task_description(
        self, task_id: int, new_description: Optional[str]
    ) -> bool:
        task = self._find_task(task_id, "update_task_description")
        if task is None:
            return False
        task.description = new_description
        return True

    def update_task_category(self, task_id: int, new_category_id: int) -> bool:
        task = self._find_task(task_id, "update_task_category")
        category = self.category_repository.find_by_id(new_category_id)
        if task is None:
            return False
        if category is None:
            logger.info(
                "update_task_category: category #%s not found", new_category_id
            )
            return False
        task.category = category
        return True

    def mark_task_done(self, task_id: int) -> bool:
        task = self._find_task(task_id, "mark_task_done")
        if task is None:
            return False
        task.mark_done()
        return True

    def mark_task_pending(self, task_id: int) -> bool:
        task = self._find_task(task_id, "mark_task_pending")
        if task is None:
            return False
        task.mark_pending()
        return True

    def delete_task(self, task_id: int) -> bool:
        deleted = self.task_repository.delete_by_id(task_id)
        if not deleted:
            logger.info("delete_task: task #%s not found", task_id)
        return deleted
