"""Shared fixtures: per-test SQLite database, app, client and users."""

import asyncio
import os
import tempfile
import uuid
from functools import lru_cache

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test-cms.db")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256")
os.environ["DATABASE_AUTO_CREATE"] = "false"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="cms-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.core.db import get_db, init_models
from app.core.security import create_access_token, get_password_hash
from app.db.models.user import User
from app.domains.media.storage import LocalMediaStorage, get_media_storage
from app.main import create_app

PASSWORD = "secret123"


@lru_cache(maxsize=1)
def password_hash() -> str:
    return get_password_hash(PASSWORD)


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cms.db'}", poolclass=NullPool)
    asyncio.run(init_models(engine))
    yield sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def storage(tmp_path):
    return LocalMediaStorage(root=str(tmp_path / "uploads"))


@pytest.fixture
def build_app(session_factory, storage):
    """Factory so tests can build an app after tweaking settings."""

    def factory():
        application = create_app()

        async def override_get_db():
            async with session_factory() as session:
                yield session

        application.dependency_overrides[get_db] = override_get_db
        application.dependency_overrides[get_media_storage] = lambda: storage
        return application

    return factory


@pytest.fixture
def client(build_app):
    with TestClient(build_app()) as test_client:
        yield test_client


@pytest.fixture
def make_user(session_factory):
    def factory(role="viewer", is_active=True, email=None, first_name="Test", last_name="User"):
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email or f"{role}-{uuid.uuid4().hex[:8]}@example.com",
            password_hash=password_hash(),
            role=role,
            is_active=is_active,
        )

        async def persist():
            async with session_factory() as session:
                session.add(user)
                await session.commit()
            return user

        return asyncio.run(persist())

    return factory


def auth_headers(user) -> dict:
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(make_user):
    return make_user("admin")


@pytest.fixture
def editor(make_user):
    return make_user("editor")


@pytest.fixture
def author(make_user):
    return make_user("author")


@pytest.fixture
def viewer(make_user):
    return make_user("viewer")


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def editor_headers(editor):
    return auth_headers(editor)


@pytest.fixture
def author_headers(author):
    return auth_headers(author)


@pytest.fixture
def viewer_headers(viewer):
    return auth_headers(viewer)


@pytest.fixture
def headers_for():
    return auth_headers
