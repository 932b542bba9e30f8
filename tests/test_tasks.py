from app.models import Task


def _create(client, headers, title="buy milk", **extra):
    return client.post("/tasks/create", headers=headers, json={"title": title, **extra})


def test_round_trip(client, register, auth_headers):
    duplicate, _ = register()
    assert duplicate.status_code == 409
    assert duplicate.json()["message"] == "User with this email already exists!"

    created = _create(client, auth_headers)
    assert created.status_code == 201
    task_id = created.json()["id"]
    assert created.json() == {"id": task_id, "title": "buy milk"}

    listing = client.get("/tasks/", headers=auth_headers)
    assert listing.status_code == 200
    assert listing.json() == [{"id": task_id, "title": "buy milk"}]

    deleted = client.delete(f"/tasks/{task_id}", headers=auth_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"id": task_id, "title": "buy milk"}

    missing = client.get(f"/tasks/{task_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": True, "message": "Task not found!"}


def test_owner_comes_from_token_not_payload(client, auth_headers, other_headers, db):
    bob_id = client.get("/users/profile", headers=other_headers).json()["id"]
    alice_id = client.get("/users/profile", headers=auth_headers).json()["id"]

    created = _create(client, auth_headers, userId=bob_id, user_id=bob_id)

    stored = db.get(Task, created.json()["id"])
    assert stored.user_id == alice_id
    assert client.get("/tasks/", headers=other_headers).json() == []


def test_description_defaults(client, auth_headers, db):
    plain = _create(client, auth_headers, title="walk")
    described = _create(client, auth_headers, title="read", description="chapter 3")

    assert db.get(Task, plain.json()["id"]).description == "Testing"
    assert db.get(Task, described.json()["id"]).description == "chapter 3"


def test_short_title_is_rejected_before_persistence(client, auth_headers, db):
    response = _create(client, auth_headers, title="ab")

    assert response.status_code == 422
    assert response.json()["error"] is True
    assert "title" in response.json()["message"]
    assert db.query(Task).count() == 0


def test_blank_padded_title_is_rejected(client, auth_headers):
    assert _create(client, auth_headers, title="  a  ").status_code == 422


def test_list_only_returns_callers_tasks(client, auth_headers, other_headers):
    _create(client, auth_headers, title="alice one")
    _create(client, auth_headers, title="alice two")
    _create(client, other_headers, title="bob one")

    alice = client.get("/tasks/", headers=auth_headers).json()
    bob = client.get("/tasks/", headers=other_headers).json()

    assert [task["title"] for task in alice] == ["alice one", "alice two"]
    assert [task["title"] for task in bob] == ["bob one"]
    assert all(set(task) == {"id", "title"} for task in alice)


def test_other_users_task_is_invisible(client, auth_headers, other_headers, db):
    task_id = _create(client, auth_headers).json()["id"]

    assert client.get(f"/tasks/{task_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/tasks/{task_id}", headers=other_headers).status_code == 404
    assert db.get(Task, task_id) is not None


def test_update_task(client, auth_headers):
    task_id = _create(client, auth_headers).json()["id"]

    response = client.put(f"/tasks/update/{task_id}", headers=auth_headers, json={"title": "buy oat milk"})

    assert response.status_code == 200
    assert response.json() == {"id": task_id, "title": "buy oat milk"}
    assert client.get(f"/tasks/{task_id}", headers=auth_headers).json()["title"] == "buy oat milk"


def test_update_is_scoped_to_owner(client, auth_headers, other_headers):
    task_id = _create(client, auth_headers).json()["id"]

    response = client.put(f"/tasks/update/{task_id}", headers=other_headers, json={"title": "hijacked"})

    assert response.status_code == 404
    assert client.get(f"/tasks/{task_id}", headers=auth_headers).json()["title"] == "buy milk"


def test_update_rejects_short_title(client, auth_headers):
    task_id = _create(client, auth_headers).json()["id"]
    response = client.put(f"/tasks/update/{task_id}", headers=auth_headers, json={"title": "no"})
    assert response.status_code == 422


def test_delete_missing_task_fails_the_same_way_every_time(client, auth_headers):
    first = client.delete("/tasks/4242", headers=auth_headers)
    second = client.delete("/tasks/4242", headers=auth_headers)

    assert first.status_code == second.status_code == 404
    assert first.json() == second.json() == {"error": True, "message": "Task not found!"}
