"""TaskListController のテスト"""

import itertools
import json

import pytest

from src.todo.controllers import TaskListController
from src.todo.models import NOT_EDITING, Task
from src.todo.storage import MemoryKeyValueStore, TaskStorage


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def controller(store):
    ticks = itertools.count(1700000000000)
    return TaskListController.mount(TaskStorage(store), clock=lambda: next(ticks))


def stored(store):
    return json.loads(store.get_item("tasks"))


def test_mount_without_stored_data_starts_empty(controller, store):
    assert controller.items == []
    assert store.get_item("tasks") is None


def test_add_appends_pending_task_with_clock_id(controller, store):
    task = controller.add("Buy milk")

    assert task == Task(id=1700000000000, text="Buy milk", completed=False)
    assert controller.items == [task]
    assert stored(store) == [{"id": 1700000000000, "text": "Buy milk", "completed": False}]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_add_is_noop(controller, store, text):
    assert controller.add(text) is None
    assert controller.items == []
    assert store.get_item("tasks") is None


def test_add_keeps_submitted_text_untrimmed(controller):
    task = controller.add("  padded  ")
    assert task.text == "  padded  "


def test_toggle_twice_restores_task(controller):
    task = controller.add("Read")
    controller.toggle(task.id)
    assert controller.items[0] == Task(id=task.id, text="Read", completed=True)

    controller.toggle(task.id)
    assert controller.items[0] == task


def test_delete_removes_one_and_ignores_unknown(controller):
    first = controller.add("a")
    second = controller.add("b")

    controller.delete(12345)
    assert controller.items == [first, second]

    controller.delete(first.id)
    assert controller.items == [second]


def test_clear_all_persists_empty_list(controller, store):
    controller.add("a")
    controller.add("b")
    controller.clear_all()
    controller.clear_all()

    assert controller.items == []
    assert stored(store) == []


def test_commit_edit_renames_and_persists(controller, store):
    task = controller.add("draft")
    controller.start_edit(task.id, task.text)
    controller.set_pending_text("final")
    controller.commit_edit()

    assert controller.items[0].text == "final"
    assert stored(store)[0]["text"] == "final"
    assert controller.edit_state is NOT_EDITING


def test_blank_commit_does_not_write(controller, store):
    task = controller.add("keep")
    before = store.get_item("tasks")

    controller.start_edit(task.id, task.text)
    controller.set_pending_text(" ")
    controller.commit_edit()

    assert controller.items[0].text == "keep"
    assert store.get_item("tasks") == before


def test_scenario_add_toggle_delete(controller):
    task = controller.add("Buy milk")
    assert len(controller.items) == 1

    controller.toggle(task.id)
    assert controller.items[0].completed is True

    controller.delete(task.id)
    assert controller.items == []


def test_fresh_mount_reproduces_saved_list(controller, store):
    controller.add("one")
    second = controller.add("two")
    controller.toggle(second.id)

    remounted = TaskListController.mount(TaskStorage(store))
    assert remounted.items == controller.items


def test_same_tick_adds_share_an_id(store):
    controller = TaskListController.mount(TaskStorage(store), clock=lambda: 1)
    controller.add("a")
    controller.add("b")

    assert [task.id for task in controller.items] == [1, 1]
