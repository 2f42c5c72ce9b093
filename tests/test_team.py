def create_member(client, headers, **overrides):
    payload = {
        "name": "Jane Doe",
        "position": "Lead Engineer",
        "department": "development",
        "bio": "Builds things.",
        "email": "jane@example.com",
        "phone": "+1 555 0101",
        **overrides,
    }
    response = client.post("/api/team", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_public_list_hides_private_and_inactive(client, admin_headers):
    create_member(client, admin_headers, order=2)
    create_member(client, admin_headers, name="Ann Lee", department="design", order=1)
    create_member(client, admin_headers, name="Former Person", status="alumni")
    create_member(client, admin_headers, name="Private Person", is_public=False)

    data = client.get("/api/team").json()["data"]
    assert [member["name"] for member in data["team_members"]] == ["Ann Lee", "Jane Doe"]
    assert all("email" not in member and "phone" not in member for member in data["team_members"])
    assert data["stats"]["total"] == 2

    admin = client.get("/api/team/admin", headers=admin_headers).json()["data"]
    assert admin["stats"]["total"] == 4
    assert admin["stats"]["alumni"] == 1
    assert admin["team_members"][0]["email"] is not None


def test_lookup_by_slug_or_id(client, admin_headers):
    member = create_member(client, admin_headers)
    assert member["slug"] == "jane-doe"

    by_slug = client.get("/api/team/jane-doe")
    assert by_slug.status_code == 200
    assert "email" not in by_slug.json()["data"]

    by_id = client.get(f"/api/team/{member['id']}")
    assert by_id.json()["data"]["slug"] == "jane-doe"

    missing = client.get("/api/team/nobody")
    assert missing.status_code == 404


def test_hidden_member_is_not_found_publicly(client, admin_headers):
    create_member(client, admin_headers, is_public=False)
    assert client.get("/api/team/jane-doe").status_code == 404


def test_duplicate_name_and_slug_regeneration(client, admin_headers):
    member = create_member(client, admin_headers)

    duplicate = client.post(
        "/api/team",
        json={"name": "JANE DOE", "position": "Designer", "department": "design", "bio": "Draws."},
        headers=admin_headers,
    )
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "A team member with this name already exists"

    updated = client.put(f"/api/team/{member['id']}", json={"name": "Jane Smith"}, headers=admin_headers)
    assert updated.json()["data"]["slug"] == "jane-smith"


def test_departments_and_admin_search(client, admin_headers):
    create_member(client, admin_headers)
    create_member(client, admin_headers, name="Bob Stone", email="bob@example.com")
    create_member(client, admin_headers, name="Cleo Park", department="sales", email="cleo@example.com")

    departments = client.get("/api/team/departments/list").json()["data"]
    assert departments == [{"name": "development", "count": 2}, {"name": "sales", "count": 1}]

    found = client.get("/api/team/admin", params={"search": "cleo@"}, headers=admin_headers).json()["data"]
    assert [member["name"] for member in found["team_members"]] == ["Cleo Park"]


def test_team_management_requires_admin(client, editor_headers):
    response = client.post(
        "/api/team",
        json={"name": "X Y", "position": "Z", "department": "sales", "bio": "B"},
        headers=editor_headers,
    )
    assert response.status_code == 403
