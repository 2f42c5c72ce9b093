import uuid

CONTACT = {
    "name": "Grace Hopper",
    "email": "Grace@Example.com",
    "subject": "New website project",
    "message": "We would like to talk about a redesign.",
    "inquiry_type": "quote",
}


def submit(client, **overrides):
    return client.post("/api/contact", json={**CONTACT, **overrides})


def test_short_name_is_rejected(client):
    response = submit(client, name="J")
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation errors"
    assert {"field": "name", "message": "Name must be at least 2 characters"} in body["errors"]


def test_short_subject_and_message_are_rejected(client):
    response = submit(client, subject="Hi", message="short")
    assert response.status_code == 400
    messages = {error["field"]: error["message"] for error in response.json()["errors"]}
    assert messages["subject"] == "Subject must be at least 5 characters"
    assert messages["message"] == "Message must be at least 10 characters"


def test_submit_returns_summary_only(client):
    response = submit(client, name="Jo")
    assert response.status_code == 200
    data = response.json()["data"]
    assert set(data) == {"id", "name", "email", "subject"}
    assert data["email"] == "grace@example.com"
    uuid.UUID(data["id"])


def test_new_contact_defaults_and_read_on_open(client, admin_headers):
    contact_id = submit(client).json()["data"]["id"]

    listing = client.get("/api/contact", headers=admin_headers).json()["data"]
    assert listing["contacts"][0]["status"] == "new"
    assert listing["contacts"][0]["priority"] == "medium"
    assert listing["contacts"][0]["source"] == "website"
    assert listing["stats"]["new"] == 1

    opened = client.get(f"/api/contact/{contact_id}", headers=admin_headers)
    assert opened.status_code == 200
    assert opened.json()["data"]["status"] == "read"

    stats = client.get("/api/contact", headers=admin_headers).json()["data"]["stats"]
    assert stats["new"] == 0
    assert stats["read"] == 1
    assert stats["by_inquiry_type"] == [{"name": "quote", "count": 1}]


def test_reply_stamps_response_date(client, admin, admin_headers):
    contact_id = submit(client).json()["data"]["id"]

    response = client.put(
        f"/api/contact/{contact_id}",
        json={"status": "replied", "assigned_to": str(admin.id), "tags": ["Lead", "lead"]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "replied"
    assert data["response_date"] is not None
    assert data["assigned_to"]["id"] == str(admin.id)


def test_assigning_unknown_user_fails(client, admin_headers):
    contact_id = submit(client).json()["data"]["id"]
    response = client.put(
        f"/api/contact/{contact_id}",
        json={"assigned_to": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Assigned user not found"


def test_filter_and_delete(client, admin_headers):
    submit(client)
    other_id = submit(client, inquiry_type="support").json()["data"]["id"]

    filtered = client.get("/api/contact", params={"inquiry_type": "support"}, headers=admin_headers)
    assert filtered.json()["data"]["pagination"]["total"] == 1

    assert client.delete(f"/api/contact/{other_id}", headers=admin_headers).status_code == 200
    missing = client.get(f"/api/contact/{other_id}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Contact not found"


def test_contacts_require_admin(client, editor_headers, viewer_headers):
    assert client.get("/api/contact").status_code == 401
    assert client.get("/api/contact", headers=editor_headers).status_code == 403
    assert client.get("/api/contact", headers=viewer_headers).status_code == 403
