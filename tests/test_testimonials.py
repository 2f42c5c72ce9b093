import pytest

TESTIMONIAL = {
    "name": "Linus Client",
    "position": "CTO",
    "company": "Acme",
    "content": "The team delivered ahead of schedule.",
    "rating": 5,
    "contact_info": {"email": "cto@acme.com", "phone": "+1 555 0100"},
}


def create_testimonial(client, headers, **overrides):
    response = client.post("/api/testimonials", json={**TESTIMONIAL, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range_on_create(client, editor_headers, rating):
    response = client.post("/api/testimonials", json={**TESTIMONIAL, "rating": rating}, headers=editor_headers)
    assert response.status_code == 400
    assert {"field": "rating", "message": "Rating must be between 1 and 5"} in response.json()["errors"]


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range_on_submit(client, rating):
    response = client.post("/api/testimonials/submit", json={**TESTIMONIAL, "rating": rating})
    assert response.status_code == 400


def test_rating_out_of_range_on_update(client, editor_headers):
    testimonial = create_testimonial(client, editor_headers)
    response = client.put(f"/api/testimonials/{testimonial['id']}", json={"rating": 6}, headers=editor_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["message"] == "Rating must be between 1 and 5"


def test_public_submission_is_held_for_review(client, admin_headers):
    response = client.post(
        "/api/testimonials/submit",
        json={**TESTIMONIAL, "status": "approved", "is_public": True, "is_featured": True},
    )
    assert response.status_code == 200
    assert response.json()["data"] is None

    assert client.get("/api/testimonials").json()["data"]["pagination"]["total"] == 0

    admin = client.get("/api/testimonials/admin", headers=admin_headers).json()["data"]
    stored = admin["testimonials"][0]
    assert stored["status"] == "pending"
    assert stored["is_public"] is False
    assert stored["is_featured"] is False
    assert stored["source"] == "website"
    assert admin["stats"]["pending"] == 1


def test_approve_and_reject(client, editor_headers):
    testimonial = create_testimonial(client, editor_headers)

    approved = client.put(f"/api/testimonials/{testimonial['id']}/approve", headers=editor_headers)
    assert approved.json()["data"]["status"] == "approved"
    assert approved.json()["data"]["is_public"] is True

    public = client.get(f"/api/testimonials/{testimonial['id']}")
    assert public.status_code == 200
    assert "contact_info" not in public.json()["data"]

    rejected = client.put(f"/api/testimonials/{testimonial['id']}/reject", headers=editor_headers)
    assert rejected.json()["data"]["status"] == "rejected"
    assert rejected.json()["data"]["is_public"] is False
    assert client.get(f"/api/testimonials/{testimonial['id']}").status_code == 404


def test_public_filters_and_stats(client, editor_headers):
    create_testimonial(client, editor_headers, status="approved", is_public=True, rating=5, is_featured=True)
    create_testimonial(
        client, editor_headers, status="approved", is_public=True, rating=3, testimonial_type="partner"
    )
    create_testimonial(client, editor_headers, status="approved", is_public=False, rating=1)

    data = client.get("/api/testimonials").json()["data"]
    assert data["stats"]["total"] == 2
    assert data["stats"]["average_rating"] == 4.0
    assert all("contact_info" not in item for item in data["testimonials"])

    assert client.get("/api/testimonials", params={"rating": 4}).json()["data"]["pagination"]["total"] == 1
    partners = client.get("/api/testimonials", params={"type": "partner"}).json()["data"]
    assert [item["rating"] for item in partners["testimonials"]] == [3]
    assert client.get("/api/testimonials", params={"featured": "true"}).json()["data"]["pagination"]["total"] == 1


def test_moderation_requires_privileges(client, author_headers, editor_headers, admin_headers):
    testimonial = create_testimonial(client, editor_headers)
    assert client.put(f"/api/testimonials/{testimonial['id']}/approve", headers=author_headers).status_code == 403
    assert client.get("/api/testimonials/admin", headers=editor_headers).status_code == 403
    assert client.delete(f"/api/testimonials/{testimonial['id']}", headers=editor_headers).status_code == 403
    assert client.delete(f"/api/testimonials/{testimonial['id']}", headers=admin_headers).status_code == 200


def test_contact_email_must_be_valid(client, editor_headers):
    response = client.post(
        "/api/testimonials",
        json={**TESTIMONIAL, "contact_info": {"email": "not-an-email"}},
        headers=editor_headers,
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "contact_info.email"


@pytest.mark.parametrize("field", ["rating", "name", "status", "is_public"])
def test_null_for_required_field_is_rejected(client, editor_headers, field):
    testimonial = create_testimonial(client, editor_headers)
    response = client.put(f"/api/testimonials/{testimonial['id']}", json={field: None}, headers=editor_headers)
    assert response.status_code == 400
    assert {"field": field, "message": "Field cannot be null"} in response.json()["errors"]


def test_null_for_optional_field_clears_it(client, editor_headers):
    testimonial = create_testimonial(client, editor_headers, location="Berlin")
    response = client.put(
        f"/api/testimonials/{testimonial['id']}", json={"location": None}, headers=editor_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["location"] is None
