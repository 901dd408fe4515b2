"""Fixtures for end-to-end HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from stackit.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over an app wired to in-memory persistence.

    Each test gets a fresh container, and so an empty store.
    """
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return ``(auth headers, user json)``."""

    def _register(username: str = "alice", password: str = "secret1"):
        response = client.post(
            "/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return {"Authorization": f"Bearer {data['token']}"}, data["user"]

    return _register
