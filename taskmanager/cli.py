from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from .app import Application
from .config import default_log_file, default_log_level, parse_log_level
from .logging_setup import setup_logging
from .models import Category, Task

logger = logging.getLogger(__name__)

RULE = "-" * 39


def _log_level_arg(value: str) -> int:
    level = parse_log_level(value, default=-1)
    if level < 0:
        raise argparse.ArgumentTypeError(f"Unknown log level '{value}'.")
    return level


def read_line(prompt: str) -> str:
    return input(prompt)


def read_int(prompt: str) -> int:
    while True:
        raw = read_line(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            print("Please enter a valid number.")


def _print_categories(categories: list[Category]) -> None:
    if not categories:
        print("No categories found.")
        return
    print(f"{'ID':>3}  NAME")
    print("-" * 40)
    for c in sorted(categories, key=lambda c: c.id):
        print(f"{c.id:>3}  {c.name}")


def _print_tasks(tasks: list[Task]) -> None:
    if not tasks:
        print("No tasks found.")
        return
    print(f"{'ID':>3}  {'ST':<4} {'CATEGORY':<14}  TITLE")
    print("-" * 60)
    for t in sorted(tasks, key=lambda t: t.id):
        st = "DONE" if t.done else "TODO"
        cat = t.category.name if t.category is not None else "-"
        print(f"{t.id:>3}  {st:<4} {str(cat):<14}  {t.title}")
        if t.description:
            print(f"{'':>10}{t.description}")


# ---- category menu ----


def cmd_list_categories(app: Application) -> None:
    _print_categories(app.list_categories())


def cmd_create_category(app: Application) -> None:
    name = read_line("Category name: ")
    category = app.create_category(name)
    if category is None:
        print("Could not create category: name is empty or already used.")
        return
    print(f"Created category #{category.id}: {category.name}")


def cmd_search_categories(app: Application) -> None:
    text = read_line("Search text: ")
    _print_categories(app.search_categories_by_name(text))


def cmd_rename_category(app: Application) -> None:
    _print_categories(app.list_categories())
    category_id = read_int("Category ID: ")
    new_name = read_line("New name: ")
    if not app.rename_category(category_id, new_name):
        print(f"Category #{category_id} not found.")
        return
    print(f"Renamed category #{category_id}.")


def cmd_delete_category(app: Application) -> None:
    _print_categories(app.list_categories())
    category_id = read_int("Category ID: ")
    if not app.delete_category(category_id):
        print(f"Category #{category_id} not found.")
        return
    print(f"Deleted category #{category_id}.")


# ---- task menu ----


def cmd_list_tasks(app: Application) -> None:
    _print_tasks(app.list_tasks())


def cmd_create_task(app: Application) -> None:
    categories = app.list_categories()
    if not categories:
        print("Create a category first.")
        return
    title = read_line("Title: ")
    if not title.strip():
        print("Invalid title. Task not created.")
        return
    description = read_line("Description: ")
    _print_categories(categories)
    category_id = read_int("Category ID: ")
    task = app.create_task(title, description, category_id)
    if task is None:
        print("Could not create task: title is empty or category not found.")
        return
    print(f"Added task #{task.id}: {task.title}")


def cmd_search_tasks(app: Application) -> None:
    text = read_line("Search text: ")
    _print_tasks(app.search_tasks_by_title(text))


def cmd_filter_by_category(app: Application) -> None:
    _print_categories(app.list_categories())
    category_id = read_int("Category ID: ")
    _print_tasks(app.list_tasks_by_category(category_id))


def cmd_filter_by_status(app: Application) -> None:
    print("1. Done")
    print("2. Pending")
    choice = read_int("Choose status: ")
    if choice not in (1, 2):
        print("Invalid choice.")
        return
    _print_tasks(app.list_tasks_by_done_status(choice == 1))


def cmd_change_title(app: Application) -> None:
    _print_tasks(app.list_tasks())
    task_id = read_int("Task ID: ")
    new_title = read_line("New title: ")
    # The service accepts any title on update; the menu never blanks one.
    if not new_title.strip():
        print("Invalid title. Operation cancelled.")
        return
    if not app.update_task_title(task_id, new_title):
        print(f"Task #{task_id} not found.")
        return
    print(f"Updated task #{task_id}.")


def cmd_change_description(app: Application) -> None:
    _print_tasks(app.list_tasks())
    task_id = read_int("Task ID: ")
    if not app.update_task_description(task_id, read_line("New description: ")):
        print(f"Task #{task_id} not found.")
        return
    print(f"Updated task #{task_id}.")


def cmd_change_category(app: Application) -> None:
    _print_tasks(app.list_tasks())
    task_id = read_int("Task ID: ")
    categories = app.list_categories()
    if not categories:
        print("Create a category first.")
        return
    _print_categories(categories)
    if not app.update_task_category(task_id, read_int("New category ID: ")):
        print("Task or category not found.")
        return
    print(f"Updated task #{task_id}.")


def cmd_mark_done(app: Application) -> None:
    task_id = read_int("Task ID: ")
    if not app.mark_task_done(task_id):
        print(f"Task #{task_id} not found.")
        return
    print(f"Marked task #{task_id} as done.")


def cmd_mark_pending(app: Application) -> None:
    task_id = read_int("Task ID: ")
    if not app.mark_task_pending(task_id):
        print(f"Task #{task_id} not found.")
        return
    print(f"Marked task #{task_id} as pending.")


def cmd_delete_task(app: Application) -> None:
    task_id = read_int("Task ID: ")
    if not app.delete_task(task_id):
        print(f"Task #{task_id} not found.")
        return
    print(f"Deleted task #{task_id}.")


Action = Callable[[Application], None]

CATEGORY_MENU: Dict[int, tuple[str, Action]] = {
    1: ("List categories", cmd_list_categories),
    2: ("Create category", cmd_create_category),
    3: ("Search categories by name", cmd_search_categories),
    4: ("Rename category", cmd_rename_category),
    5: ("Delete category", cmd_delete_category),
}

MODIFY_MENU: Dict[int, tuple[str, Action]] = {
    1: ("Change title", cmd_change_title),
    2: ("Change description", cmd_change_description),
    3: ("Change category", cmd_change_category),
}


def cmd_modify_task(app: Application) -> None:
    run_submenu(app, "Modify task", MODIFY_MENU, back_label="Back")


TASK_MENU: Dict[int, tuple[str, Action]] = {
    1: ("List tasks", cmd_list_tasks),
    2: ("Create task", cmd_create_task),
    3: ("Search tasks by title", cmd_search_tasks),
    4: ("Filter tasks by category", cmd_filter_by_category),
    5: ("Filter tasks by status", cmd_filter_by_status),
    6: ("Modify task", cmd_modify_task),
    7: ("Mark task as done", cmd_mark_done),
    8: ("Mark task as pending", cmd_mark_pending),
    9: ("Delete task", cmd_delete_task),
}


def run_submenu(
    app: Application,
    title: str,
    menu: Dict[int, tuple[str, Action]],
    back_label: str = "Back to main menu",
) -> None:
    while True:
        print()
        print(f"--- {title} ---")
        for key, (label, _) in menu.items():
            print(f"{key}. {label}")
        print(f"0. {back_label}")

        choice = read_int("\nChoose an option: ")
        if choice == 0:
            return
        entry = menu.get(choice)
        if entry is None:
            print("Invalid choice. Please try again.")
            continue
        entry[1](app)


def run_menu(app: Application) -> None:
    print("Welcome to Task Manager CLI")
    while True:
        print()
        print(RULE)
        print(" Main menu")
        print(RULE)
        print("1. Manage categories")
        print("2. Manage tasks")
        print("0. Exit")
        print(RULE)

        choice = read_int("\nChoose an option: ")
        if choice == 1:
            run_submenu(app, "Category menu", CATEGORY_MENU)
        elif choice == 2:
            run_submenu(app, "Task menu", TASK_MENU)
        elif choice == 0:
            print("\nExiting.")
            return
        else:
            print("Invalid choice. Please try again.")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taskmanager",
        description="Task Manager: in-memory tasks and categories behind a text menu.",
    )
    p.add_argument(
        "--log-level",
        type=_log_level_arg,
        help="Console log level (default: WARNING or TASKMANAGER_LOG_LEVEL env var)",
    )
    p.add_argument(
        "--log-file",
        help="Write the full debug log to this file (default: TASKMANAGER_LOG_FILE env var)",
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = ns.log_level if ns.log_level is not None else default_log_level()
    log_file = Path(ns.log_file).expanduser().resolve() if ns.log_file else default_log_file()
    setup_logging(console_level=level, log_file=log_file)

    app = Application.create_default()
    logger.debug("Starting menu")
    try:
        run_menu(app)
    except EOFError:
        print()
        return 0
    except KeyboardInterrupt:
        print()
        return 130
    return 0
