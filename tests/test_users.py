from app.models import User

PASSWORD = "Abc123!@"


def test_register_returns_user_without_password(register, db):
    response, headers = register()

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "name", "email", "phone"}
    assert body["email"] == "a@x.com"
    assert headers["Authorization"].startswith("Bearer ")

    stored = db.query(User).filter(User.email == "a@x.com").one()
    assert stored.password != PASSWORD


def test_register_duplicate_email_fails(register):
    register()
    response, headers = register(name="Someone Else")

    assert response.status_code == 409
    assert response.json() == {"error": True, "message": "User with this email already exists!"}
    assert headers["Authorization"] == ""


def test_register_rejects_weak_password(register):
    response, _ = register(password="abcdef")

    assert response.status_code == 422
    assert response.json()["error"] is True
    assert "Password too weak" in response.json()["message"]


def test_register_rejects_bad_email_and_short_name(client):
    response = client.post("/users/create", json={
        "name": "Al", "email": "not-an-email", "phone": "1", "password": PASSWORD,
    })
    assert response.status_code == 422
    message = response.json()["message"]
    assert "name" in message
    assert "email" in message


def test_login_issues_token(register, client):
    register()
    response = client.post("/users/login", json={"email": "a@x.com", "password": PASSWORD})

    assert response.status_code == 200
    assert response.json()["email"] == "a@x.com"
    assert "password" not in response.json()
    assert response.headers["Authorization"].startswith("Bearer ")


def test_login_failures_are_indistinguishable(register, client):
    register()
    wrong_password = client.post("/users/login", json={"email": "a@x.com", "password": "Wrong123!@"})
    unknown_email = client.post("/users/login", json={"email": "nobody@x.com", "password": PASSWORD})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "error": True,
        "message": "Invalid email or password!",
    }


def test_logout_clears_authorization_header(client):
    response = client.post("/users/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}
    assert response.headers["Authorization"] == ""


def test_profile(client, auth_headers):
    response = client.get("/users/profile", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["name"] == "Alice"
    assert "password" not in response.json()


def test_profile_requires_token(client):
    response = client.get("/users/profile")

    assert response.status_code == 401
    assert response.json() == {"error": True, "message": "Unauthorized"}


def test_profile_of_vanished_user(client, auth_headers, db):
    db.query(User).delete()
    db.commit()

    response = client.get("/users/profile", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "User does not exist!"


def test_update_profile(client, auth_headers):
    response = client.put("/users/update", headers=auth_headers, json={
        "name": "Alice Cooper", "email": "a@x.com", "phone": "555-9999",
    })

    assert response.status_code == 200
    assert response.json()["name"] == "Alice Cooper"
    assert response.json()["phone"] == "555-9999"
    assert client.get("/users/profile", headers=auth_headers).json()["phone"] == "555-9999"


def test_update_profile_cannot_change_email(client, auth_headers):
    response = client.put("/users/update", headers=auth_headers, json={
        "name": "Alice", "email": "new@x.com", "phone": "1",
    })

    assert response.status_code == 403
    assert response.json()["message"] == "You are not authorized to perform this action!"
    assert client.get("/users/profile", headers=auth_headers).json()["email"] == "a@x.com"


def test_register_without_secret_fails(app, client, register):
    app.state.settings.jwt_secret = None
    response, headers = register()

    assert response.status_code == 500
    assert response.json()["error"] is True
    assert headers["Authorization"] == ""


def test_register_without_secret_writes_nothing(app, client, register, db):
    app.state.settings.jwt_secret = ""
    register()

    assert db.query(User).count() == 0


def test_padded_password_logs_in_as_typed(register, client):
    response, _ = register(password=" Abc123!@ ", name="  Alice  ")
    assert response.status_code == 201
    assert response.json()["name"] == "Alice"

    padded = client.post("/users/login", json={"email": "a@x.com", "password": " Abc123!@ "})
    trimmed = client.post("/users/login", json={"email": "a@x.com", "password": "Abc123!@"})

    assert padded.status_code == 200
    assert trimmed.status_code == 401


def test_duplicate_email_caught_by_unique_index(register, db, monkeypatch):
    from app.repositories import user_repository

    register()
    # let the second registration get past the lookup, as a concurrent one would
    monkeypatch.setattr(user_repository, "find_one", lambda *args, **kwargs: None)
    response, headers = register(name="Racer")

    assert response.status_code == 409
    assert response.json() == {"error": True, "message": "User with this email already exists!"}
    assert headers["Authorization"] == ""
    assert db.query(User).filter(User.email == "a@x.com").count() == 1
