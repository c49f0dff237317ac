from http import HTTPStatus

from fastapi.testclient import TestClient

from app.crud.user import get_user
from app.database import JsonStore
from app.core.settings import settings

USERS_ENDPOINT = f"{settings.API_PREFIX}/users/"


def test_register_user(client: TestClient, test_team):
    payload = {"email": "new@example.com", "name": "New", "team_id": test_team.id}
    response = client.post(USERS_ENDPOINT, json=payload)
    assert response.status_code == HTTPStatus.CREATED, response.text
    data = response.json()
    assert data["email"] == "new@example.com"
    assert data["role"] == "member"
    assert data["team_id"] == test_team.id

def test_register_user_invalid_email(client: TestClient):
    response = client.post(USERS_ENDPOINT, json={"email": "not-an-email", "name": "Bad"})
    assert response.status_code == HTTPStatus.BAD_REQUEST, response.text

def test_register_user_invalid_role(client: TestClient):
    response = client.post(USERS_ENDPOINT, json={"email": "r@example.com", "name": "R", "role": "owner"})
    assert response.status_code == HTTPStatus.BAD_REQUEST, response.text

def test_register_duplicate_email_is_accepted(client: TestClient):
    payload = {"email": "twice@example.com", "name": "Twice"}
    assert client.post(USERS_ENDPOINT, json=payload).status_code == HTTPStatus.CREATED
    assert client.post(USERS_ENDPOINT, json=payload).status_code == HTTPStatus.CREATED

def test_list_users_by_team(client: TestClient, test_team, test_user):
    client.post(USERS_ENDPOINT, json={"email": "loner@example.com", "name": "Loner"})

    everyone = client.get(USERS_ENDPOINT).json()
    assert [u["name"] for u in everyone] == ["Alice", "Loner"]

    members = client.get(USERS_ENDPOINT, params={"team_id": test_team.id}).json()
    assert [u["id"] for u in members] == [test_user.id]

def test_get_user_profile(client: TestClient, test_user):
    response = client.get(f"{USERS_ENDPOINT}{test_user.id}")
    assert response.status_code == HTTPStatus.OK, response.text
    assert response.json()["email"] == test_user.email

def test_get_user_not_found(client: TestClient):
    assert client.get(f"{USERS_ENDPOINT}nobody").status_code == HTTPStatus.NOT_FOUND

def test_get_by_email(client: TestClient, test_user):
    response = client.get(f"{USERS_ENDPOINT}by-email/{test_user.email}")
    assert response.status_code == HTTPStatus.OK, response.text
    assert response.json()["id"] == test_user.id
    assert client.get(f"{USERS_ENDPOINT}by-email/ghost@example.com").status_code == HTTPStatus.NOT_FOUND

def test_patch_user_leave_team(client: TestClient, test_user, db: JsonStore):
    response = client.patch(f"{USERS_ENDPOINT}{test_user.id}", json={"team_id": None, "role": "viewer"})
    assert response.status_code == HTTPStatus.OK, response.text
    data = response.json()
    assert data["team_id"] is None
    assert data["role"] == "viewer"
    assert data["name"] == "Alice"
    assert get_user(db, test_user.id).team_id is None

def test_patch_user_not_found(client: TestClient):
    assert client.patch(f"{USERS_ENDPOINT}nobody", json={"name": "x"}).status_code == HTTPStatus.NOT_FOUND

def test_delete_user(client: TestClient, test_user):
    assert client.delete(f"{USERS_ENDPOINT}{test_user.id}").status_code == HTTPStatus.NO_CONTENT
    assert client.delete(f"{USERS_ENDPOINT}{test_user.id}").status_code == HTTPStatus.NOT_FOUND
