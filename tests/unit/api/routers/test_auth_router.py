"""
Tests for auth router (POST /api/auth/register, POST /api/auth/login).
"""

from fastapi import status

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


# ============================================================================
# REGISTER
# ============================================================================


def test_register_returns_token_and_user(client, token_service):
    # Act
    response = client.post(
        REGISTER_URL,
        json={"name": "Alice", "email": "Alice@Example.com", "password": "secret1"},
    )

    # Assert
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert set(body) == {"token", "expiresAt", "user"}
    assert set(body["user"]) == {"id", "name", "email", "createdOn"}
    assert body["user"]["email"] == "alice@example.com"
    assert token_service.verify(body["token"]).name == "Alice"


def test_register_duplicate_email_is_409(client, register_user):
    register_user(email="alice@example.com")

    response = client.post(
        REGISTER_URL,
        json={"name": "Other", "email": "ALICE@example.com", "password": "secret2"},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["statusCode"] == 409
    assert "alice@example.com" in response.json()["error"]


def test_register_invalid_input_is_400(client):
    response = client.post(
        REGISTER_URL, json={"name": "", "email": "nope", "password": "123"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    error = response.json()["error"]
    assert "name must not be empty" in error
    assert "password must have at least 6 characters" in error


def test_register_missing_field_is_400(client):
    response = client.post(REGISTER_URL, json={"email": "a@b.c"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["statusCode"] == 400


# ============================================================================
# LOGIN
# ============================================================================


def test_login_success(client, register_user):
    registered = register_user(email="alice@example.com", password="secret1")

    response = client.post(
        LOGIN_URL, json={"email": "alice@example.com", "password": "secret1"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user"]["id"] == registered["user"]["id"]
    assert response.json()["token"]


def test_login_wrong_password_is_401(client, register_user):
    register_user(email="alice@example.com", password="secret1")

    response = client.post(
        LOGIN_URL, json={"email": "alice@example.com", "password": "wrong-one"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"error": "Invalid email or password", "statusCode": 401}
    assert "token" not in response.json()


def test_login_unknown_email_is_401(client):
    response = client.post(
        LOGIN_URL, json={"email": "ghost@example.com", "password": "whatever"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"] == "Invalid email or password"
