from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import func, select

from photoshare.app import CONTAINER_EXTENSION, create_app
from photoshare.infrastructure.container import Container
from photoshare.infrastructure.db.models import Photo, User
from photoshare.shared.config import AppConfig

ALICE = {"username": "alice", "email": "alice@example.com", "password": "secret123"}
BOB = {"username": "bob", "email": "bob@example.com", "password": "hunter22"}
CAT = {"title": "Cat", "caption": "meow", "photo_url": "https://cdn.example.com/cat.jpg"}


@pytest.fixture()
def app(app_config: AppConfig):
    container = Container(app_config)
    flask_app = create_app(container=container)
    yield flask_app
    container.database.drop_all()
    container.database.dispose()


@pytest.fixture()
def client(app: Flask):
    with app.test_client() as test_client:
        yield test_client


def _register_and_login(client: FlaskClient, account: dict[str, str]) -> tuple[int, dict[str, str]]:
    register = client.post("/api/users/register", json=account)
    assert register.status_code == 201
    login = client.post(
        "/api/users/login", json={"email": account["email"], "password": account["password"]}
    )
    assert login.status_code == 200
    return register.get_json()["data"]["id"], {"Authorization": f"Bearer {login.get_json()['token']}"}


def _count(app: Flask, model) -> int:
    container: Container = app.extensions[CONTAINER_EXTENSION]
    with container.database.session_scope() as session:
        return session.scalar(select(func.count()).select_from(model))


def test_two_users_end_to_end(app: Flask, client: FlaskClient) -> None:
    register = client.post("/api/users/register", json=ALICE)
    assert register.status_code == 201
    alice_id = register.get_json()["data"]["id"]

    wrong = client.post("/api/users/login", json={"email": ALICE["email"], "password": "wrong-pass"})
    assert wrong.status_code == 400
    assert wrong.get_json()["message"] == "Invalid email or password"

    login = client.post("/api/users/login", json={"email": ALICE["email"], "password": ALICE["password"]})
    assert login.status_code == 200
    assert login.get_json()["message"] == "Login successful"
    alice = {"Authorization": f"Bearer {login.get_json()['token']}"}

    profile = client.get(f"/api/users/{alice_id}", headers=alice)
    assert profile.status_code == 200
    assert profile.get_json()["data"]["email"] == ALICE["email"]

    bob_id, bob = _register_and_login(client, BOB)
    assert client.get(f"/api/users/{alice_id}", headers=bob).status_code == 401

    created = client.post("/api/photos", json=CAT, headers=bob)
    assert created.status_code == 201
    bob_photo = created.get_json()["data"]
    assert bob_photo["user_id"] == bob_id
    assert bob_photo["email"] == BOB["email"]

    denied = client.delete(f"/api/photos/{bob_photo['id']}", headers=alice)
    assert denied.status_code == 401
    assert denied.get_json()["error"] == "not_allowed"
    assert client.get(f"/api/photos/{bob_photo['id']}", headers=bob).status_code == 200
    assert client.get("/api/photos", headers=alice).get_json() == {"data": []}


def test_duplicate_registration_is_conflict(app: Flask, client: FlaskClient) -> None:
    assert client.post("/api/users/register", json=ALICE).status_code == 201

    same_email = client.post("/api/users/register", json={**ALICE, "username": "alice2"})
    same_username = client.post("/api/users/register", json={**ALICE, "email": "other@example.com"})

    assert same_email.status_code == 409
    assert same_username.status_code == 409
    assert _count(app, User) == 1


def test_password_is_never_stored_or_returned_in_clear(app: Flask, client: FlaskClient) -> None:
    register = client.post("/api/users/register", json=ALICE)

    assert ALICE["password"] not in register.get_data(as_text=True)
    container: Container = app.extensions[CONTAINER_EXTENSION]
    with container.database.session_scope() as session:
        stored = session.scalars(select(User.password_hash)).one()
    assert stored != ALICE["password"]
    assert stored.startswith("pbkdf2:sha256")


def test_photo_lifecycle(client: FlaskClient) -> None:
    _, alice = _register_and_login(client, ALICE)

    first = client.post("/api/photos", json=CAT, headers=alice).get_json()["data"]
    second = client.post(
        "/api/photos",
        json={"title": "Dog", "photo_url": "https://cdn.example.com/dog.png"},
        headers=alice,
    ).get_json()["data"]

    listed = client.get("/api/photos", headers=alice).get_json()["data"]
    assert [p["id"] for p in listed] == [second["id"], first["id"]]

    updated = client.put(
        f"/api/photos/{first['id']}",
        json={"title": "Cat 2", "photo_url": "https://cdn.example.com/cat2.gif"},
        headers=alice,
    )
    assert updated.status_code == 200
    assert updated.get_json()["data"]["title"] == "Cat 2"
    assert updated.get_json()["data"]["caption"] is None

    assert client.delete(f"/api/photos/{first['id']}", headers=alice).status_code == 200
    assert client.get(f"/api/photos/{first['id']}", headers=alice).status_code == 404


def test_update_profile_then_login_with_new_password(client: FlaskClient) -> None:
    alice_id, alice = _register_and_login(client, ALICE)

    updated = client.put(
        f"/api/users/{alice_id}",
        json={"username": "alice", "email": "alice@new.example.com", "password": "brandnew"},
        headers=alice,
    )
    assert updated.status_code == 200

    old = client.post("/api/users/login", json={"email": ALICE["email"], "password": ALICE["password"]})
    new = client.post("/api/users/login", json={"email": "alice@new.example.com", "password": "brandnew"})
    assert old.status_code == 400
    assert new.status_code == 200


def test_deleting_user_removes_their_photos(app: Flask, client: FlaskClient) -> None:
    alice_id, alice = _register_and_login(client, ALICE)
    _, bob = _register_and_login(client, BOB)
    client.post("/api/photos", json=CAT, headers=alice)
    client.post("/api/photos", json=CAT, headers=alice)
    client.post("/api/photos", json=CAT, headers=bob)

    response = client.delete(f"/api/users/{alice_id}", headers=alice)

    assert response.status_code == 200
    assert _count(app, User) == 1
    assert _count(app, Photo) == 1


def test_token_of_deleted_user_cannot_read_profile(client: FlaskClient) -> None:
    alice_id, alice = _register_and_login(client, ALICE)
    client.delete(f"/api/users/{alice_id}", headers=alice)

    response = client.get(f"/api/users/{alice_id}", headers=alice)

    assert response.status_code == 404


def test_token_of_deleted_user_cannot_create_photo(app: Flask, client: FlaskClient) -> None:
    alice_id, alice = _register_and_login(client, ALICE)
    client.delete(f"/api/users/{alice_id}", headers=alice)

    response = client.post("/api/photos", json=CAT, headers=alice)

    assert response.status_code == 404
    assert response.get_json()["error"] == "user_not_found"
    assert _count(app, Photo) == 0


def test_responses_carry_request_id_and_security_headers(client: FlaskClient) -> None:
    response = client.get("/api/photos", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 401
    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_metrics_endpoint_counts_requests(client: FlaskClient) -> None:
    client.get("/api/photos")
    client.get("/api/photos/1")

    response = client.get("/metrics")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'photoshare_requests_total{endpoint="/api/photos",status="401"} 1.0' in body
    assert 'endpoint="/api/photos/<photo_id>"' in body


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
