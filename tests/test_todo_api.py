import json
import logging

import pytest
from fastapi.testclient import TestClient

from src.server.app import create_app, reset_component


def create_test_client(tmp_path, monkeypatch) -> TestClient:
    storage_path = tmp_path / "local_storage.json"
    monkeypatch.setenv("TODO_BOARD_STORAGE_PATH", str(storage_path))
    reset_component()
    app = create_app()
    return TestClient(app)


@pytest.fixture
def client(tmp_path, monkeypatch):
    yield create_test_client(tmp_path, monkeypatch)
    reset_component()


def stored_tasks(tmp_path):
    data = json.loads((tmp_path / "local_storage.json").read_text(encoding="utf-8"))
    return json.loads(data["tasks"])


def test_page_renders_seed_list_and_empty_summary(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Todo 1" in resp.text
    assert "Total: 0, Completed: 0, Pending: 0" in resp.text


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_task_crud_flow(client, tmp_path):
    resp = client.post("/tasks", data={"text": "Buy milk"}, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"

    tasks = stored_tasks(tmp_path)
    assert len(tasks) == 1
    assert tasks[0]["text"] == "Buy milk"
    assert tasks[0]["completed"] is False
    task_id = tasks[0]["id"]

    client.post(f"/tasks/{task_id}/toggle")
    assert client.get("/api/summary").json() == {"total": 1, "completed": 1, "pending": 0}

    client.post(f"/tasks/{task_id}/edit")
    client.post("/tasks/save", data={"text": "Buy oat milk"})
    state = client.get("/api/state").json()
    assert state["filter"] == "all"
    assert state["tasks"] == [{"id": task_id, "text": "Buy oat milk", "completed": True}]

    client.post(f"/tasks/{task_id}/delete")
    assert stored_tasks(tmp_path) == []


def test_blank_task_is_ignored(client, tmp_path):
    resp = client.post("/tasks", data={"text": "   "})
    assert resp.status_code == 200
    assert client.get("/api/summary").json()["total"] == 0
    assert not (tmp_path / "local_storage.json").exists()


def test_static_list_flow(client):
    client.post("/static/2/delete")
    client.post("/static/1/toggle")
    client.post("/static/3/edit")
    client.post("/static/save", data={"text": "Renamed"})

    html = client.get("/").text
    assert "Todo 2" not in html
    assert "Renamed" in html
    assert '<span class="done">Todo 1</span>' in html

    client.post("/static/clear")
    html = client.get("/").text
    assert "Todo 1" not in html
    assert "Renamed" not in html


def test_clear_tasks(client, tmp_path):
    client.post("/tasks", data={"text": "a"})
    client.post("/tasks", data={"text": "b"})
    client.post("/tasks/clear")

    assert client.get("/api/summary").json() == {"total": 0, "completed": 0, "pending": 0}
    assert stored_tasks(tmp_path) == []


def test_tasks_reload_after_remount(client, tmp_path, monkeypatch):
    client.post("/tasks", data={"text": "persisted"})

    fresh = create_test_client(tmp_path, monkeypatch)
    state = fresh.get("/api/state").json()
    assert [task["text"] for task in state["tasks"]] == ["persisted"]


def test_storage_write_failure_returns_500(client, tmp_path, caplog):
    (tmp_path / "local_storage.json").mkdir()

    with caplog.at_level(logging.ERROR, logger="src.server.routes.todo_list"):
        resp = client.post("/tasks", data={"text": "cannot save"}, follow_redirects=False)

    errors = [r for r in caplog.records if r.name == "src.server.routes.todo_list"]
    assert len(errors) == 1
    assert errors[0].levelno == logging.ERROR
    assert errors[0].exc_info is not None
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to add task"}


def test_stored_rows_with_unexpected_shape_are_served_and_removable(tmp_path, monkeypatch):
    """形式チェックされない保存データでも表示・削除できる"""
    rows = [{"id": "abc", "text": "x", "completed": False}, {"text": "no id"}]
    (tmp_path / "local_storage.json").write_text(
        json.dumps({"tasks": json.dumps(rows)}), encoding="utf-8"
    )
    client = create_test_client(tmp_path, monkeypatch)
    try:
        assert client.get("/").status_code == 200
        assert client.get("/api/summary").json() == {"total": 2, "completed": 0, "pending": 2}

        resp = client.get("/api/state")
        assert resp.status_code == 200
        assert resp.json()["tasks"] == [
            {"id": "abc", "text": "x", "completed": False},
            {"id": None, "text": "no id", "completed": None},
        ]

        resp = client.post("/tasks/abc/toggle", follow_redirects=False)
        assert resp.status_code == 303
        assert stored_tasks(tmp_path)[0]["completed"] is True

        resp = client.post("/tasks/abc/delete", follow_redirects=False)
        assert resp.status_code == 303
        assert stored_tasks(tmp_path) == [{"id": None, "text": "no id", "completed": None}]
    finally:
        reset_component()


def test_unknown_task_id_in_url_is_noop(client):
    client.post("/tasks", data={"text": "keep"})

    resp = client.post("/tasks/not-a-task/delete", follow_redirects=False)
    assert resp.status_code == 303
    assert client.get("/api/summary").json()["total"] == 1
