import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.database import Base
from main import create_app

PASSWORD = "Abc123!@"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        jwt_expiration="15m",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    Base.metadata.create_all(bind=application.state.engine)
    yield application
    Base.metadata.drop_all(bind=application.state.engine)
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register(client):
    """Register a user through the API and return (response, headers)"""
    def _register(email="a@x.com", name="Alice", phone="555-0100", password=PASSWORD):
        response = client.post("/users/create", json={
            "name": name,
            "email": email,
            "phone": phone,
            "password": password,
        })
        headers = {"Authorization": response.headers.get("Authorization", "")}
        return response, headers
    return _register


@pytest.fixture
def auth_headers(register):
    response, headers = register()
    assert response.status_code == 201
    return headers


@pytest.fixture
def other_headers(register):
    response, headers = register(email="b@x.com", name="Bob", phone="555-0200")
    assert response.status_code == 201
    return headers
