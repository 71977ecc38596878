"""Общие фикстуры для тестов."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from fittrack.app import create_app
from fittrack.config import Config
from fittrack.database import get_db, init_db, make_engine, make_session_factory


@pytest.fixture
def app_config(tmp_path):
    """Конфигурация с временной SQLite-базой."""
    return Config(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def session_factory(app_config):
    engine = make_engine(app_config.DATABASE_URL)
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    """Сессия для прямых вызовов сервисов."""
    with get_db(session_factory) as session:
        yield session


@pytest.fixture
def client(app_config, session_factory):
    app = create_app(app_config, session_factory=session_factory)
    with TestClient(app) as test_client:
        yield test_client


def _storage_failure(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


@pytest.fixture
def fail_storage(monkeypatch):
    """
    Включить сбой БД внутри теста.

    fail_storage("query") ломает чтение, fail_storage("commit") ломает запись.
    monkeypatch.undo() возвращает сессию в рабочее состояние.
    """
    def _fail(method: str = "query") -> None:
        monkeypatch.setattr(Session, method, _storage_failure)
    return _fail


@pytest.fixture
def make_user(client):
    """Создать пользователя через API."""
    def _make(**overrides) -> dict:
        payload = {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "username": "jane",
            "password": "secret",
        }
        payload.update(overrides)
        response = client.post("/api/users/create-user", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_intensity(client):
    """Создать уровень интенсивности через API."""
    def _make(**overrides) -> dict:
        payload = {"type": "HI", "value": 3}
        payload.update(overrides)
        response = client.post("/api/intensity/create-intensity", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
