# File: tests/test_users.py

from store_backend.core.security import verify_password


def make_user(client, username="alice", password="s3cret"):
    client.post("/api/signup", json={"username": username, "password": password})
    users = client.get("/api/users").json()
    return next(u for u in users if u["username"] == username)


def test_list_users_empty(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    assert resp.json() == []


def test_update_username_keeps_password(client):
    user = make_user(client)

    resp = client.put(f"/api/users/{user['id']}", json={"username": "alicia"})
    assert resp.status_code == 200
    assert resp.text == "User updated successfully!"

    [updated] = client.get("/api/users").json()
    assert updated["username"] == "alicia"
    assert updated["password"] == user["password"]


def test_update_with_empty_password_keeps_hash(client):
    user = make_user(client)
    client.put(f"/api/users/{user['id']}", json={"username": "alice", "password": ""})
    [updated] = client.get("/api/users").json()
    assert updated["password"] == user["password"]


def test_update_password_rehashes(client):
    user = make_user(client)

    resp = client.put(
        f"/api/users/{user['id']}", json={"username": "alice", "password": "n3w"}
    )
    assert resp.status_code == 200

    [updated] = client.get("/api/users").json()
    assert updated["password"] != "n3w"
    assert verify_password("n3w", updated["password"])
    assert client.post(
        "/api/login", json={"username": "alice", "password": "n3w"}
    ).status_code == 200
    assert client.post(
        "/api/login", json={"username": "alice", "password": "s3cret"}
    ).status_code == 401


def test_update_missing_user_is_silent(client):
    make_user(client)
    before = client.get("/api/users").json()

    resp = client.put("/api/users/9999", json={"username": "nobody", "password": "x"})
    assert resp.status_code == 200
    assert resp.text == "User updated successfully!"
    assert client.get("/api/users").json() == before


def test_update_to_taken_username_fails(client):
    make_user(client, "alice")
    bob = make_user(client, "bob")

    resp = client.put(f"/api/users/{bob['id']}", json={"username": "alice"})
    assert resp.status_code == 500
    assert resp.text == "Error updating user"


def test_delete_user_is_idempotent(client):
    user = make_user(client)

    for _ in range(2):
        resp = client.delete(f"/api/users/{user['id']}")
        assert resp.status_code == 200
        assert resp.text == "User deleted successfully!"

    assert all(u["id"] != user["id"] for u in client.get("/api/users").json())


def test_non_integer_id_is_plain_500(client):
    resp = client.delete("/api/users/abc")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Error deleting user"

    resp = client.put("/api/users/abc", json={"username": "x"})
    assert resp.status_code == 500
    assert resp.text == "Error updating user"


def test_user_routes_database_failure(failing_client):
    resp = failing_client.get("/api/users")
    assert resp.status_code == 500
    assert resp.text == "Error retrieving users"

    resp = failing_client.put("/api/users/1", json={"username": "x"})
    assert resp.status_code == 500
    assert resp.text == "Error updating user"

    resp = failing_client.delete("/api/users/1")
    assert resp.status_code == 500
    assert resp.text == "Error deleting user"
