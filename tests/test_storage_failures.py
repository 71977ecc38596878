"""Сбой БД на любом маршруте даёт 500 без деталей и без изменений в данных."""
import pytest

USER = {"name": "Jane", "email": "jane@example.com", "username": "jane", "password": "secret"}
NEW_USER = {"name": "John", "email": "john@example.com", "username": "john", "password": "secret"}
WEIGHT = {"weight": 70, "userId": 1}
NUTRITION = {"date": "2025-01-16T14:30:00Z", "userId": 1, "intensityId": 1}
INTENSITY = {"type": "LI", "value": 1}

ROUTES = [
    ("get", "/api/users", None),
    ("get", "/api/users/1", None),
    ("post", "/api/users/create-user", NEW_USER),
    ("put", "/api/users/update-user/1", USER),
    ("delete", "/api/users/delete-user/1", None),
    ("get", "/api/weight", None),
    ("get", "/api/weight/1", None),
    ("post", "/api/weight/create-weight", WEIGHT),
    ("put", "/api/weight/update-weight/1", WEIGHT),
    ("delete", "/api/weight/delete-weight/1", None),
    ("get", "/api/nutrition", None),
    ("get", "/api/nutrition/1", None),
    ("post", "/api/nutrition/create-nutrition", NUTRITION),
    ("put", "/api/nutrition/update-nutrition/1", NUTRITION),
    ("delete", "/api/nutrition/delete-nutrition/1", None),
    ("get", "/api/intensity", None),
    ("get", "/api/intensity/1", None),
    ("post", "/api/intensity/create-intensity", INTENSITY),
    ("put", "/api/intensity/update-intensity/1", INTENSITY),
    ("delete", "/api/intensity/delete-intensity/1", None),
]


@pytest.fixture
def seeded(client, make_user, make_intensity):
    """По одной записи каждого ресурса с id=1."""
    make_user(**USER)
    make_intensity(type="HI", value=3)
    assert client.post("/api/weight/create-weight", json=WEIGHT).status_code == 201
    assert client.post("/api/nutrition/create-nutrition", json=NUTRITION).status_code == 201
    return {
        path: client.get(path).json()
        for path in ("/api/users", "/api/weight", "/api/nutrition", "/api/intensity")
    }


@pytest.mark.parametrize("method, path, payload", ROUTES)
def test_read_failure_returns_500(client, seeded, fail_storage, monkeypatch, method, path, payload):
    fail_storage("query")

    kwargs = {"json": payload} if payload is not None else {}
    response = client.request(method.upper(), path, **kwargs)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}

    monkeypatch.undo()
    for list_path, before in seeded.items():
        assert client.get(list_path).json() == before


@pytest.mark.parametrize(
    "method, path, payload",
    [route for route in ROUTES if route[0] in ("post", "put", "delete")],
)
def test_write_failure_returns_500(client, seeded, fail_storage, monkeypatch, method, path, payload):
    fail_storage("commit")

    kwargs = {"json": payload} if payload is not None else {}
    response = client.request(method.upper(), path, **kwargs)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}

    monkeypatch.undo()
    for list_path, before in seeded.items():
        assert client.get(list_path).json() == before
