def create_case_study(client, headers, **overrides):
    payload = {
        "title": "Retail platform rebuild",
        "description": "Moving a retailer to a headless storefront.",
        "content": "Full story of the migration.",
        "category": "E-commerce",
        "technologies": ["React", "Node.js"],
        "client": {"name": "Acme", "industry": "Retail"},
        "project": {"duration": "6 months", "team_size": 4},
        "images": {"featured": "/uploads/images/acme.png"},
        "metrics": [{"label": "Conversion", "value": "+35%"}],
        "status": "published",
        **overrides,
    }
    response = client.post("/api/case-studies", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_keeps_nested_documents(client, editor_headers):
    case_study = create_case_study(client, editor_headers)
    assert case_study["slug"] == "retail-platform-rebuild"
    assert case_study["client"]["name"] == "Acme"
    assert case_study["images"]["gallery"] == []
    assert case_study["metrics"] == [{"label": "Conversion", "value": "+35%", "improvement": None}]
    assert case_study["published_at"] is not None


def test_team_size_must_be_positive(client, editor_headers):
    response = client.post(
        "/api/case-studies",
        json={
            "title": "Bad",
            "description": "Bad",
            "content": "Bad",
            "category": "Web",
            "project": {"team_size": 0},
        },
        headers=editor_headers,
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "project.team_size"


def test_filters_and_public_scope(client, editor_headers):
    create_case_study(client, editor_headers)
    create_case_study(
        client, editor_headers, title="Banking app", category="Fintech", technologies=["Python"], is_featured=True
    )
    create_case_study(client, editor_headers, title="Secret project", status="draft")

    public = client.get("/api/case-studies").json()["data"]
    assert public["pagination"]["total"] == 2
    assert public["stats"]["featured"] == 1

    by_category = client.get("/api/case-studies", params={"category": "commerce"}).json()["data"]
    assert [item["title"] for item in by_category["case_studies"]] == ["Retail platform rebuild"]

    by_technology = client.get("/api/case-studies", params={"technology": "Python"}).json()["data"]
    assert [item["title"] for item in by_technology["case_studies"]] == ["Banking app"]

    featured = client.get("/api/case-studies", params={"featured": "true"}).json()["data"]
    assert featured["pagination"]["total"] == 1


def test_detail_with_related(client, editor_headers):
    main = create_case_study(client, editor_headers)
    create_case_study(client, editor_headers, title="Marketplace launch")
    create_case_study(client, editor_headers, title="Banking app", category="Fintech")

    data = client.get(f"/api/case-studies/{main['slug']}").json()["data"]
    assert data["case_study"]["view_count"] == 1
    assert [item["title"] for item in data["related_case_studies"]] == ["Marketplace launch"]

    assert client.get("/api/case-studies/unknown").json()["message"] == "Case study not found"


def test_categories_and_technologies(client, editor_headers):
    create_case_study(client, editor_headers)
    create_case_study(client, editor_headers, title="Second store", technologies=["React"])
    create_case_study(client, editor_headers, title="Hidden", status="draft", technologies=["Rust"])

    categories = client.get("/api/case-studies/categories/list").json()["data"]
    assert categories == [{"name": "E-commerce", "count": 2}]

    technologies = client.get("/api/case-studies/technologies/popular").json()["data"]
    assert technologies == [{"name": "React", "count": 2}, {"name": "Node.js", "count": 1}]


def test_update_and_delete_roles(client, editor_headers, admin_headers):
    case_study = create_case_study(client, editor_headers)

    updated = client.put(
        f"/api/case-studies/{case_study['id']}", json={"title": "Retail platform v2"}, headers=editor_headers
    ).json()["data"]
    assert updated["slug"] == "retail-platform-v2"

    assert client.delete(f"/api/case-studies/{case_study['id']}", headers=editor_headers).status_code == 403
    assert client.delete(f"/api/case-studies/{case_study['id']}", headers=admin_headers).status_code == 200
