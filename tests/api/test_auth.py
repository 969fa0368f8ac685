from taskboard.db_handlers import UserDBHandler


def test_register_then_signin(client):
    response = client.post("/register", json={"username": "alice"})
    assert response.status_code == 200
    assert response.json() == {"ok": True}

    response = client.post("/signin", json={"username": "alice"})
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_register_twice_is_a_conflict(client, run_against_db):
    first = client.post("/register", json={"username": "alice"})
    second = client.post("/register", json={"username": "alice"})

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {"error": "User already exists"}
    users = run_against_db(
        lambda factory: UserDBHandler(factory).get_multi_by_attributes(username="alice")
    )
    assert len(users) == 1


def test_register_requires_username(client):
    for body in ({}, {"username": ""}, {"username": None}):
        response = client.post("/register", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Username required"}


def test_signin_unknown_user_is_not_found(client):
    response = client.post("/signin", json={"username": "nobody"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_signin_without_username_matches_nobody(client):
    client.post("/register", json={"username": "alice"})

    response = client.post("/signin", json={})
    assert response.status_code == 404


def test_signin_ignores_password(client):
    client.post("/register", json={"username": "alice", "password": "first"})

    response = client.post("/signin", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_malformed_body_is_a_bad_request(client):
    response = client.post(
        "/register",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}
