from datetime import timedelta

from app.core.security import create_access_token


def test_register_login_and_me(client):
    response = client.post(
        "/api/auth/register",
        json={"first_name": "Ada", "last_name": "Lovelace", "email": "Ada@Example.com", "password": "secret123"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["user"]["email"] == "ada@example.com"
    assert body["data"]["user"]["role"] == "viewer"
    assert "password_hash" not in body["data"]["user"]

    login = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert login.status_code == 200
    token = login.json()["data"]["access_token"]
    assert login.json()["data"]["user"]["last_login"] is not None

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["full_name"] == "Ada Lovelace"


def test_register_duplicate_email(client, viewer):
    response = client.post(
        "/api/auth/register",
        json={"first_name": "Dup", "last_name": "User", "email": viewer.email, "password": "secret123"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "User already exists with this email"}


def test_login_with_wrong_password(client, viewer):
    response = client.post("/api/auth/login", json={"email": viewer.email, "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_of_deactivated_account(client, make_user):
    user = make_user("editor", is_active=False)
    response = client.post("/api/auth/login", json={"email": user.email, "password": "secret123"})
    assert response.status_code == 401
    assert response.json()["message"] == "Account has been deactivated"


def test_missing_token_is_rejected(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Access denied. No token provided."}


def test_garbage_token_is_rejected(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token is not valid"


def test_expired_token_is_rejected(client, viewer):
    token = create_access_token({"sub": str(viewer.id)}, expires_delta=timedelta(seconds=-5))
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token is not valid"


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token({"sub": "00000000-0000-0000-0000-00000000abcd"})
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token is not valid"


def test_deactivated_user_token_is_rejected(client, make_user, headers_for):
    user = make_user("admin", is_active=False)
    response = client.get("/api/auth/me", headers=headers_for(user))
    assert response.status_code == 401
    assert response.json()["message"] == "Account has been deactivated"


def test_role_outside_allow_list_is_forbidden(client, viewer_headers):
    response = client.get("/api/contact", headers=viewer_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Role viewer is not authorized to access this route"


def test_optional_auth_ignores_invalid_token(client):
    response = client.get("/api/posts", headers={"Authorization": "Bearer broken"})
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_update_profile_and_change_password(client, viewer, viewer_headers):
    response = client.put("/api/auth/me", json={"bio": "Hello there"}, headers=viewer_headers)
    assert response.status_code == 200
    assert response.json()["data"]["bio"] == "Hello there"

    wrong = client.post(
        "/api/auth/change-password",
        json={"current_password": "nope", "new_password": "another123"},
        headers=viewer_headers,
    )
    assert wrong.status_code == 400
    assert wrong.json()["message"] == "Current password is incorrect"

    changed = client.post(
        "/api/auth/change-password",
        json={"current_password": "secret123", "new_password": "another123"},
        headers=viewer_headers,
    )
    assert changed.status_code == 200

    login = client.post("/api/auth/login", json={"email": viewer.email, "password": "another123"})
    assert login.status_code == 200
