def test_admin_lists_users_with_role_stats(client, admin_headers, make_user):
    make_user("editor")
    make_user("author")
    make_user("author")

    response = client.get("/api/users", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["pagination"]["total"] == 4
    by_role = {item["name"]: item["count"] for item in data["stats"]["by_role"]}
    assert by_role == {"admin": 1, "editor": 1, "author": 2}
    assert data["stats"]["by_role"][0] == {"name": "author", "count": 2}

    filtered = client.get("/api/users", params={"role": "author"}, headers=admin_headers)
    assert filtered.json()["data"]["pagination"]["total"] == 2


def test_admin_changes_role_and_deactivates(client, admin_headers, make_user, headers_for):
    user = make_user("viewer")

    response = client.put(
        f"/api/users/{user.id}",
        json={"role": "editor", "is_active": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["role"] == "editor"
    assert response.json()["data"]["is_active"] is False

    me = client.get("/api/auth/me", headers=headers_for(user))
    assert me.status_code == 401


def test_admin_cannot_delete_own_account(client, admin, admin_headers):
    response = client.delete(f"/api/users/{admin.id}", headers=admin_headers)
    assert response.status_code == 400


def test_delete_user(client, admin_headers, make_user):
    user = make_user("author")
    assert client.delete(f"/api/users/{user.id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/users/{user.id}", headers=admin_headers).status_code == 404


def test_editor_cannot_manage_users(client, editor_headers):
    response = client.get("/api/users", headers=editor_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Role editor is not authorized to access this route"
