"""
Shared fixtures: an isolated repository and app per test, plus auth headers.
"""
import pytest
from fastapi.testclient import TestClient
from techhive.app import create_app
from techhive.config import Settings
from techhive.modules.users.repositories import UserRepository

TEST_TOKEN = "test-token"


@pytest.fixture
def settings():
    return Settings(auth_token=TEST_TOKEN)


@pytest.fixture
def repository():
    return UserRepository()


@pytest.fixture
def app(settings, repository):
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def client(app):
    """TestClient used as a context manager so the lifespan seeds users."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def new_user_payload():
    return {
        "firstName": "Kabir",
        "lastName": "Rao",
        "email": "kabir.rao@techhive.local",
        "department": "Finance",
        "title": "Analyst",
    }
