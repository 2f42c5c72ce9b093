import asyncio
import os

import pytest

from app.core.config import settings
from app.domains.media.storage import LocalMediaStorage

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def upload(client, headers, name="photo.png", content=PNG, mimetype="image/png", **form):
    return client.post(
        "/api/media/upload",
        files={"file": (name, content, mimetype)},
        data=form,
        headers=headers,
    )


def test_upload_stores_file_by_category(client, editor_headers, storage):
    response = upload(client, editor_headers, alt="Team photo", tags="Office, team")
    assert response.status_code == 201, response.text
    media = response.json()["data"]

    assert media["category"] == "image"
    assert media["url"].startswith("/uploads/images/file-")
    assert media["url"].endswith(".png")
    assert media["size"] == len(PNG)
    assert media["original_name"] == "photo.png"
    assert media["tags"] == ["office", "team"]
    assert media["metadata"] == {"format": "png"}
    assert os.path.exists(os.path.join(storage.root, "images", media["filename"]))


def test_documents_land_in_their_own_directory(client, editor_headers):
    response = upload(client, editor_headers, name="brief.pdf", content=b"%PDF-1.4", mimetype="application/pdf")
    assert response.status_code == 201
    assert response.json()["data"]["url"].startswith("/uploads/documents/")


def test_missing_file_is_rejected(client, editor_headers):
    response = client.post("/api/media/upload", data={"alt": "nothing"}, headers=editor_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "No file uploaded"


def test_disallowed_type_is_rejected(client, editor_headers, storage):
    response = upload(client, editor_headers, name="script.exe", content=b"MZ", mimetype="application/octet-stream")
    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid file type")
    assert not os.path.exists(os.path.join(storage.root, "other"))


def test_oversized_file_is_rejected(client, editor_headers, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_size", 16)
    response = upload(client, editor_headers)
    assert response.status_code == 400
    assert response.json()["message"].startswith("File too large")


def test_list_and_stats(client, editor_headers):
    upload(client, editor_headers)
    upload(client, editor_headers, name="brief.pdf", content=b"%PDF-1.4", mimetype="application/pdf")

    data = client.get("/api/media", headers=editor_headers).json()["data"]
    assert data["pagination"]["total"] == 2
    assert data["stats"]["total_size"] == len(PNG) + len(b"%PDF-1.4")

    images = client.get("/api/media", params={"category": "image"}, headers=editor_headers).json()["data"]
    assert [item["category"] for item in images["media_files"]] == ["image"]


def test_delete_removes_file(client, editor_headers, storage):
    media = upload(client, editor_headers).json()["data"]
    path = os.path.join(storage.root, "images", media["filename"])

    response = client.delete(f"/api/media/{media['id']}", headers=editor_headers)
    assert response.status_code == 200
    assert not os.path.exists(path)
    assert client.get(f"/api/media/{media['id']}", headers=editor_headers).status_code == 404


def test_delete_survives_missing_file(client, editor_headers, storage):
    media = upload(client, editor_headers).json()["data"]
    os.remove(os.path.join(storage.root, "images", media["filename"]))

    response = client.delete(f"/api/media/{media['id']}", headers=editor_headers)
    assert response.status_code == 200
    assert client.get(f"/api/media/{media['id']}", headers=editor_headers).status_code == 404


def test_media_requires_editor(client, author_headers):
    assert upload(client, author_headers).status_code == 403
    assert client.get("/api/media", headers=author_headers).status_code == 403


def test_local_storage_writes_and_removes_files(tmp_path):
    storage = LocalMediaStorage(root=str(tmp_path / "media"), url_prefix="/files/")

    path = asyncio.run(storage.save("documents", "brief.pdf", b"%PDF-1.4"))
    assert path == str(tmp_path / "media" / "documents" / "brief.pdf")
    with open(path, "rb") as f:
        assert f.read() == b"%PDF-1.4"
    assert storage.url_for("documents", "brief.pdf") == "/files/documents/brief.pdf"

    asyncio.run(storage.delete(path))
    assert not os.path.exists(path)
    with pytest.raises(FileNotFoundError):
        asyncio.run(storage.delete(path))
