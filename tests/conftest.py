from __future__ import annotations

import pytest

from taskmanager.app import Application
from taskmanager.repository import CategoryRepository, TaskRepository


@pytest.fixture()
def category_repo() -> CategoryRepository:
    return CategoryRepository()


@pytest.fixture()
def task_repo() -> TaskRepository:
    return TaskRepository()


@pytest.fixture()
def app(category_repo: CategoryRepository, task_repo: TaskRepository) -> Application:
    return Application(category_repo, task_repo)
