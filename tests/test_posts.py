def create_post(client, headers, **overrides):
    payload = {
        "title": "Shipping a design system",
        "content": "How we rebuilt our component library from scratch.",
        "category": "technology",
        "status": "published",
        **overrides,
    }
    response = client.post("/api/posts", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_anonymous_list_shows_published_only(client, author_headers):
    create_post(client, author_headers, title="Published one")
    create_post(client, author_headers, title="Draft one", status="draft")

    data = client.get("/api/posts").json()["data"]
    assert [post["title"] for post in data["posts"]] == ["Published one"]
    assert data["stats"] == {"total": 1, "published": 1, "draft": 0, "featured": 0}


def test_editor_sees_drafts(client, author_headers, editor_headers):
    create_post(client, author_headers, title="Draft one", status="draft")
    data = client.get("/api/posts", headers=editor_headers).json()["data"]
    assert data["pagination"]["total"] == 1
    assert data["stats"]["draft"] == 1


def test_category_filter_with_pagination(client, author_headers):
    for index in range(7):
        create_post(client, author_headers, title=f"Tech post {index}")
    create_post(client, author_headers, title="Company news", category="company")
    create_post(client, author_headers, title="Tech draft", status="draft")

    response = client.get("/api/posts", params={"category": "technology", "page": 2, "limit": 5})
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["posts"]) == 2
    assert all(post["category"] == "technology" for post in data["posts"])
    assert all(post["status"] == "published" for post in data["posts"])
    assert data["pagination"] == {"page": 2, "limit": 5, "total": 7, "pages": 2}


def test_tag_filter_and_search(client, author_headers):
    create_post(client, author_headers, title="Tagged post", tags=["Python", " fastapi "])
    create_post(client, author_headers, title="Other post", tags=["design"])

    tagged = client.get("/api/posts", params={"tag": "python"}).json()["data"]
    assert [post["title"] for post in tagged["posts"]] == ["Tagged post"]
    assert tagged["posts"][0]["tags"] == ["python", "fastapi"]

    found = client.get("/api/posts", params={"search": "OTHER"}).json()["data"]
    assert [post["title"] for post in found["posts"]] == ["Other post"]


def test_search_treats_wildcards_literally(client, author_headers):
    create_post(client, author_headers, title="Growth of 50% in a quarter")
    create_post(client, author_headers, title="Plain title")
    create_post(client, author_headers, title="snake_case naming")

    def titles(term):
        data = client.get("/api/posts", params={"search": term}).json()["data"]
        return [post["title"] for post in data["posts"]]

    assert titles("%") == ["Growth of 50% in a quarter"]
    assert titles("_") == ["snake_case naming"]
    assert titles("50%") == ["Growth of 50% in a quarter"]
    assert titles("\\") == []


def test_null_title_on_update_is_rejected(client, author_headers):
    post = create_post(client, author_headers)
    response = client.put(f"/api/posts/{post['id']}", json={"title": None}, headers=author_headers)
    assert response.status_code == 400
    assert {"field": "title", "message": "Field cannot be null"} in response.json()["errors"]


def test_duplicate_title_is_rejected(client, author_headers):
    create_post(client, author_headers)
    response = client.post(
        "/api/posts",
        json={"title": "shipping a design system", "content": "Again", "category": "news"},
        headers=author_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "A post with this title already exists"


def test_author_cannot_edit_foreign_post(client, make_user, headers_for, author_headers, editor_headers):
    post = create_post(client, author_headers)
    other = headers_for(make_user("author"))

    response = client.put(f"/api/posts/{post['id']}", json={"title": "Hijacked"}, headers=other)
    assert response.status_code == 403
    assert response.json()["message"] == "You can only edit your own posts"

    response = client.put(f"/api/posts/{post['id']}", json={"featured": True}, headers=editor_headers)
    assert response.status_code == 200
    assert response.json()["data"]["featured"] is True


def test_slug_follows_title(client, author_headers):
    post = create_post(client, author_headers, title="Hello World!")
    assert post["slug"] == "hello-world"

    updated = client.put(
        f"/api/posts/{post['id']}", json={"title": "Goodbye World"}, headers=author_headers
    ).json()["data"]
    assert updated["slug"] == "goodbye-world"

    untouched = client.put(
        f"/api/posts/{post['id']}", json={"featured": True}, headers=author_headers
    ).json()["data"]
    assert untouched["slug"] == "goodbye-world"


def test_read_time_and_excerpt_defaults(client, author_headers):
    content = " ".join(["word"] * 401)
    post = create_post(client, author_headers, content=content)
    assert post["read_time"] == 3
    assert len(post["excerpt"]) == 300
    assert post["excerpt"].endswith("...")
    assert post["published_at"] is not None


def test_detail_counts_views_and_lists_related(client, author_headers):
    post = create_post(client, author_headers, title="Main post")
    create_post(client, author_headers, title="Related post")
    create_post(client, author_headers, title="Unrelated post", category="company")

    first = client.get(f"/api/posts/{post['slug']}").json()["data"]
    second = client.get(f"/api/posts/{post['slug']}").json()["data"]
    assert second["post"]["view_count"] == first["post"]["view_count"] + 1
    assert [item["title"] for item in first["related_posts"]] == ["Related post"]


def test_draft_detail_hidden_from_public(client, author_headers, editor_headers):
    post = create_post(client, author_headers, status="draft")
    response = client.get(f"/api/posts/{post['slug']}")
    assert response.status_code == 404
    assert response.json()["message"] == "Post not found"

    response = client.get(f"/api/posts/{post['slug']}", headers=editor_headers)
    assert response.status_code == 200
    assert response.json()["data"]["post"]["view_count"] == 0


def test_like_post(client, author_headers):
    post = create_post(client, author_headers)
    client.post(f"/api/posts/{post['id']}/like")
    response = client.post(f"/api/posts/{post['id']}/like")
    assert response.status_code == 200
    assert response.json()["data"] == {"likes": 2}


def test_categories_and_popular_tags(client, author_headers):
    create_post(client, author_headers, title="One", tags=["python", "api"])
    create_post(client, author_headers, title="Two", tags=["python"])
    create_post(client, author_headers, title="Three", category="news", tags=["python"])
    create_post(client, author_headers, title="Hidden", status="draft", tags=["secret"])

    categories = client.get("/api/posts/categories/list").json()["data"]
    assert categories == [{"name": "technology", "count": 2}, {"name": "news", "count": 1}]

    tags = client.get("/api/posts/tags/popular").json()["data"]
    assert tags == [{"name": "python", "count": 3}, {"name": "api", "count": 1}]


def test_delete_requires_editor(client, author_headers, editor_headers):
    post = create_post(client, author_headers)
    assert client.delete(f"/api/posts/{post['id']}", headers=author_headers).status_code == 403
    assert client.delete(f"/api/posts/{post['id']}", headers=editor_headers).status_code == 200
    assert client.post(f"/api/posts/{post['id']}/like").status_code == 404
