import os
import tempfile

# Il DB viene creato all'import di app.core.database: l'env va impostato prima.
_TEST_DIR = tempfile.mkdtemp(prefix="team-cards-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR}/test.db"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_DIR, "uploads")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Card, TeamMember  # noqa: E402,F401


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setenv("UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(reset_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(reset_db, upload_dir):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_team_member(client):
    def _make(name="Ada", role="Engineer", filename="a.png"):
        resp = client.post(
            "/admin/teams",
            data={"name": name, "role": role},
            files={"photo": (filename, b"\x89PNG fake", "image/png")},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _make


@pytest.fixture
def make_card(client):
    def _make(title="Speed", description="Fast delivery", filename="c.png"):
        resp = client.post(
            "/admin/cards",
            data={"title": title, "description": description},
            files={"photo": (filename, b"\x89PNG fake", "image/png")},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _make
