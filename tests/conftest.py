"""Shared fixtures: both repository backends, an app per test and auth headers."""

import pytest
from fastapi.testclient import TestClient

from notesphere.db import build_engine
from notesphere.main import create_app
from notesphere.repositories import MemoryCatalogRepository, SqlCatalogRepository
from notesphere.security import create_access_token, get_password_hash

# bcrypt es lento; un hash por sesión basta
PASSWORD = "secret123"
PASSWORD_HASH = get_password_hash(PASSWORD)


def make_repository(kind):
    if kind == "memory":
        return MemoryCatalogRepository()
    repo = SqlCatalogRepository(build_engine("sqlite://"))
    repo.create_schema()
    return repo


@pytest.fixture(params=["memory", "sql"])
def repo(request):
    """Every test using this fixture runs once per backend."""
    return make_repository(request.param)


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def temp_dir(tmp_path):
    return tmp_path / "tmp"


@pytest.fixture
def app(repo, uploads_dir, temp_dir):
    return create_app(
        repo,
        uploads_dir=uploads_dir,
        temp_dir=temp_dir,
        max_upload_size=1024,
        seed_on_startup=False,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_user(repo):
    return repo.create_user("boss", PASSWORD_HASH, is_admin=True)


@pytest.fixture
def plain_user(repo):
    return repo.create_user("student", PASSWORD_HASH, is_admin=False)


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_access_token(subject=admin_user.username)}"}


@pytest.fixture
def user_headers(plain_user):
    return {"Authorization": f"Bearer {create_access_token(subject=plain_user.username)}"}
