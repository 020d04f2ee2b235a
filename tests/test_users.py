from conftest import ADMIN, REGULAR


def test_create_and_list_users(client, make_user):
    nina = make_user("nina", role="regular", department="ICU")
    assert nina["id"] >= 1
    assert nina["role"] == "regular"
    assert nina["created_at"]

    r = client.get("/users", headers=REGULAR)
    assert r.status_code == 200
    assert [u["username"] for u in r.json()] == ["nina"]


def test_duplicate_username_or_email(client, make_user):
    make_user("nina", email="nina@x.org")

    r = client.post(
        "/users",
        json={"username": "nina", "email": "other@x.org", "role": "regular", "department": "ICU"},
        headers=ADMIN,
    )
    assert r.status_code == 409
    assert r.json()["detail"]["code"] == "ALREADY_EXISTS"

    r2 = client.post(
        "/users",
        json={"username": "nina2", "email": "nina@x.org", "role": "regular", "department": "ICU"},
        headers=ADMIN,
    )
    assert r2.status_code == 409


def test_create_user_validation(client):
    r = client.post(
        "/users",
        json={"username": "ab", "email": "not-an-email", "role": "boss", "department": ""},
        headers=ADMIN,
    )
    assert r.status_code == 422
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_update_user_is_sparse(client, make_user):
    user = make_user("omar", department="Radiology")

    r = client.patch(f"/users/{user['id']}", json={"role": "admin"}, headers=ADMIN)
    assert r.status_code == 200
    data = r.json()
    assert data["role"] == "admin"
    assert data["department"] == "Radiology"
    assert data["email"] == "omar@x.org"


def test_update_user_rejects_null_for_required_field(client, make_user):
    user = make_user("omar")
    r = client.patch(f"/users/{user['id']}", json={"department": None}, headers=ADMIN)
    assert r.status_code == 422


def test_update_missing_user(client):
    r = client.patch("/users/999", json={"role": "admin"}, headers=ADMIN)
    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "NOT_FOUND"


def test_delete_user(client, make_user):
    user = make_user("gone")

    r = client.delete(f"/users/{user['id']}", headers=ADMIN)
    assert r.json() == {"success": True}

    r2 = client.delete(f"/users/{user['id']}", headers=ADMIN)
    assert r2.status_code == 200
    assert r2.json() == {"success": False}
