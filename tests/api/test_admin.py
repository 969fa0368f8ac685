import uuid

import pytest
from fastapi.testclient import TestClient

from taskboard.db_handlers import UserDBHandler


@pytest.fixture
def admin_client(app, run_against_db):
    run_against_db(lambda factory: UserDBHandler(factory).promote_to_admin("root"))
    with TestClient(app) as c:
        yield c


def test_admin_signin(admin_client):
    response = admin_client.post("/admin", json={"username": "root"})

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_admin_signin_refuses_regular_and_unknown_users(admin_client):
    admin_client.post("/register", json={"username": "alice"})

    for username in ("alice", "nobody"):
        response = admin_client.post("/admin", json={"username": username})
        assert response.status_code == 403
        assert response.json() == {"error": "Not an admin"}


def test_registered_user_is_never_admin(client):
    client.post("/register", json={"username": "root"})

    response = client.post("/admin", json={"username": "root"})
    assert response.status_code == 403


def test_admin_lists_all_tasks_by_date_as_text(client):
    for username, date in [
        ("alice", "2024-10-1"),
        ("bob", "2023-12-31"),
        ("carol", "2024-2-1"),
    ]:
        client.post(f"/tasks/{username}", json={"title": date, "date": date})
    client.post("/tasks/dave", json={"title": "undated"})

    response = client.get("/admin/tasks")
    assert response.status_code == 200
    tasks = response.json()

    assert [t["date"] for t in tasks] == ["2024-2-1", "2024-10-1", "2023-12-31", None]
    assert {t["username"] for t in tasks} == {"alice", "bob", "carol", "dave"}


def test_admin_update_and_delete(client):
    task = client.post("/tasks/alice", json={"title": "Draft", "done": False}).json()

    updated = client.put(f"/admin/tasks/{task['_id']}", json={"done": True}).json()
    assert updated["done"] is True
    assert updated["title"] == "Draft"

    response = client.delete(f"/admin/tasks/{task['_id']}")
    assert response.json() == {"ok": True}
    assert client.get("/admin/tasks").json() == []


def test_admin_update_unknown_id_returns_null(client):
    response = client.put(f"/admin/tasks/{uuid.uuid4()}", json={"title": "x"})

    assert response.status_code == 200
    assert response.json() is None


def test_admin_delete_unknown_id_is_ok(client):
    response = client.delete(f"/admin/tasks/{uuid.uuid4()}")

    assert response.json() == {"ok": True}


def test_admin_routes_absent_when_disabled(settings_factory):
    from main import create_app

    app = create_app(settings_factory(ADMIN_ENABLED=False))
    with TestClient(app) as c:
        assert c.post("/admin", json={"username": "root"}).status_code == 404
        assert c.get("/admin/tasks").status_code == 404
        assert c.get("/tasks/alice").status_code == 200
