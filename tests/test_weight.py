"""Тесты API записей веса."""


def test_list_weights_empty(client):
    response = client.get("/api/weight")
    assert response.status_code == 200
    assert response.json() == []


def test_create_and_list_weights(client, make_user):
    user = make_user()
    for value in (70.5, 71, 69.25):
        response = client.post("/api/weight/create-weight", json={"weight": value, "userId": user["id"]})
        assert response.status_code == 201

    weights = client.get("/api/weight").json()
    assert sorted(w["weight"] for w in weights) == [69.25, 70.5, 71.0]
    assert all(w["userId"] == user["id"] for w in weights)


def test_create_weight_rounds_to_two_places(client, make_user):
    user = make_user()
    response = client.post("/api/weight/create-weight", json={"weight": "80.456", "userId": user["id"]})
    assert response.status_code == 201
    body = response.json()
    assert body["weight"] == 80.46
    assert "creationDate" in body


def test_create_weight_missing_field(client, make_user):
    user = make_user()

    response = client.post("/api/weight/create-weight", json={"userId": user["id"]})
    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields"}

    response = client.post("/api/weight/create-weight", json={"weight": 70})
    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields"}

    assert client.get("/api/weight").json() == []


def test_create_weight_invalid_user(client):
    response = client.post("/api/weight/create-weight", json={"weight": 70, "userId": 999})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid User Id"}
    assert client.get("/api/weight").json() == []


def test_create_weight_user_id_must_be_integer(client, make_user):
    make_user()
    response = client.post("/api/weight/create-weight", json={"weight": 70, "userId": "1"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request"}


def test_get_weight(client, make_user):
    user = make_user()
    created = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]}).json()

    response = client.get(f"/api/weight/{created['id']}")
    assert response.status_code == 200
    assert response.json()["weight"] == 70.0


def test_get_weight_not_found(client):
    response = client.get("/api/weight/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Weight not found"}


def test_update_weight(client, make_user):
    user = make_user()
    created = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]}).json()

    response = client.put(f"/api/weight/update-weight/{created['id']}", json={"weight": 68.4, "userId": user["id"]})
    assert response.status_code == 200
    assert client.get(f"/api/weight/{created['id']}").json()["weight"] == 68.4


def test_update_weight_invalid_user(client, make_user):
    user = make_user()
    created = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]}).json()

    response = client.put(f"/api/weight/update-weight/{created['id']}", json={"weight": 71, "userId": 999})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid User Id"}


def test_update_weight_not_found(client, make_user):
    user = make_user()
    response = client.put("/api/weight/update-weight/999", json={"weight": 71, "userId": user["id"]})
    assert response.status_code == 404
    assert response.json() == {"message": "Weight not found"}


def test_delete_weight(client, make_user):
    user = make_user()
    created = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]}).json()

    response = client.delete(f"/api/weight/delete-weight/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Weight deleted successfully"}

    again = client.delete(f"/api/weight/delete-weight/{created['id']}")
    assert again.status_code == 404


def test_deleting_user_clears_weight_owner(client, make_user):
    """Удаление пользователя обнуляет userId, запись веса остаётся."""
    user = make_user()
    created = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]}).json()

    assert client.delete(f"/api/users/delete-user/{user['id']}").status_code == 200

    weight = client.get(f"/api/weight/{created['id']}").json()
    assert weight["userId"] is None


def test_get_weight_storage_failure(client, fail_storage):
    fail_storage("query")
    response = client.get("/api/weight/1")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}


def test_create_weight_storage_failure_leaves_no_record(client, make_user, fail_storage, monkeypatch):
    user = make_user()
    fail_storage("commit")

    response = client.post("/api/weight/create-weight", json={"weight": 70, "userId": user["id"]})
    assert response.status_code == 500

    monkeypatch.undo()
    assert client.get("/api/weight").json() == []


def test_create_weight_oversized_user_id(client):
    response = client.post("/api/weight/create-weight", json={"weight": 70, "userId": 10 ** 20})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid User Id"}


def test_oversized_weight_id_is_not_found(client):
    response = client.get(f"/api/weight/{10 ** 20}")
    assert response.status_code == 404
    assert response.json() == {"message": "Weight not found"}


def test_create_weight_negative(client, make_user):
    user = make_user()
    response = client.post("/api/weight/create-weight", json={"weight": -5, "userId": user["id"]})
    assert response.status_code == 400
    assert response.json() == {"message": "weight must not be negative"}


def test_create_weight_out_of_range_after_rounding(client, make_user):
    """99999999.999 округляется до 100000000.00 и не помещается в Numeric(10, 2)."""
    user = make_user()
    response = client.post("/api/weight/create-weight", json={"weight": "99999999.999", "userId": user["id"]})
    assert response.status_code == 400
    assert response.json() == {"message": "weight is out of range"}
    assert client.get("/api/weight").json() == []


def test_create_weight_huge_value(client, make_user):
    user = make_user()
    response = client.post("/api/weight/create-weight", json={"weight": "1e40", "userId": user["id"]})
    assert response.status_code == 400
    assert response.json() == {"message": "weight is out of range"}
