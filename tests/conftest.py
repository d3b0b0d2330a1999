"""Общие фикстуры: приложение собирается через create_app с подменяемым репозиторием."""
import pytest
from fastapi.testclient import TestClient

from users_app.core.config import AppSettings
from users_app.main import create_app


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(log_level="WARNING", log_json=False)


@pytest.fixture
def make_client(settings):
    def _make(user_repository=None, **client_kwargs) -> TestClient:
        return TestClient(create_app(settings=settings, user_repository=user_repository), **client_kwargs)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
