import logging

from taskmanager.app import Application


def test_create_default_gives_isolated_instances():
    a = Application.create_default()
    b = Application.create_default()
    a.create_category("Work")
    assert b.list_categories() == []
    assert b.create_category("Work").id == 1


def test_create_category_trims_name(app: Application):
    c = app.create_category("  Work  ")
    assert c is not None
    assert c.name == "Work"


def test_create_category_rejects_blank(app: Application):
    assert app.create_category(None) is None
    assert app.create_category("") is None
    assert app.create_category("   ") is None
    assert app.list_categories() == []


def test_create_category_rejects_duplicate_ignoring_case(app: Application):
    assert app.create_category("Work") is not None
    assert app.create_category("WORK") is None
    assert app.create_category(" work ") is None
    assert len(app.list_categories()) == 1


def test_rename_category_does_not_revalidate(app: Application):
    work = app.create_category("Work")
    app.create_category("Home")
    assert app.rename_category(work.id, "Home") is True
    assert work.name == "Home"
    assert app.rename_category(work.id, "") is True
    assert work.name == ""


def test_rename_missing_category(app: Application):
    assert app.rename_category(42, "X") is False


def test_search_categories(app: Application):
    app.create_category("University")
    app.create_category("Home")
    assert [c.name for c in app.search_categories_by_name("uni")] == ["University"]
    assert app.search_categories_by_name("") == []


def test_delete_category_orphans_only_its_tasks(app: Application):
    work = app.create_category("Work")
    home = app.create_category("Home")
    t1 = app.create_task("A", "", work.id)
    t2 = app.create_task("B", "", work.id)
    t3 = app.create_task("C", "", home.id)

    assert app.delete_category(work.id) is True

    assert t1.category is None
    assert t2.category is None
    assert t3.category is home
    assert len(app.list_tasks()) == 3
    assert app.list_tasks_by_category(work.id) == []


def test_delete_missing_category(app: Application):
    assert app.delete_category(1) is False


def test_create_task_normalizes_fields(app: Application):
    work = app.create_category("Work")
    t = app.create_task("  Report  ", None, work.id)
    assert t.title == "Report"
    assert t.description == ""
    assert t.done is False
    assert t.category is work

    t2 = app.create_task("Slides", "  draft  ", work.id)
    assert t2.description == "draft"


def test_create_task_rejects_blank_title(app: Application):
    work = app.create_category("Work")
    assert app.create_task(None, "d", work.id) is None
    assert app.create_task("  ", "d", work.id) is None
    assert app.list_tasks() == []


def test_create_task_rejects_unknown_category(app: Application):
    assert app.create_task("Buy milk", "desc", 9999) is None
    assert len(app.task_repository) == 0


def test_list_tasks_by_done_status(app: Application):
    work = app.create_category("Work")
    a = app.create_task("A", "", work.id)
    b = app.create_task("B", "", work.id)
    app.mark_task_done(a.id)
    assert app.list_tasks_by_done_status(True) == [a]
    assert app.list_tasks_by_done_status(False) == [b]


def test_update_title_and_description_are_unconditional(app: Application):
    work = app.create_category("Work")
    t = app.create_task("A", "x", work.id)
    assert app.update_task_title(t.id, "") is True
    assert t.title == ""
    assert app.update_task_description(t.id, None) is True
    assert t.description is None
    assert app.update_task_title(99, "B") is False
    assert app.update_task_description(99, "B") is False


def test_update_task_category_leaves_state_on_failure(app: Application):
    work = app.create_category("Work")
    t = app.create_task("A", "", work.id)
    assert app.update_task_category(t.id, 99) is False
    assert t.category is work
    assert app.update_task_category(99, work.id) is False


def test_mark_done_and_pending(app: Application):
    work = app.create_category("Work")
    t = app.create_task("A", "", work.id)
    assert app.mark_task_done(t.id) is True
    assert app.mark_task_done(t.id) is True
    assert t.done is True
    assert app.mark_task_pending(t.id) is True
    assert t.done is False
    assert app.mark_task_pending(999) is False
    assert app.mark_task_done(999) is False


def test_delete_task(app: Application):
    work = app.create_category("Work")
    t = app.create_task("A", "", work.id)
    assert app.delete_task(t.id) is True
    assert app.delete_task(t.id) is False
    assert app.list_tasks() == []


def test_failures_are_logged(app: Application, caplog):
    caplog.set_level(logging.INFO, logger="taskmanager")
    app.create_category("Work")
    app.create_category("work")
    assert "duplicate name 'work'" in caplog.text
