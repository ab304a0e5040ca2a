import os
import uuid

# must be set before app.config is imported
os.environ["DATABASE_URL"] = "sqlite:///./test_tracker.db"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app

PASSWORD = "SecurePass123!"


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def new_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}@example.com"


def register(client: TestClient, email: str = None, password: str = PASSWORD) -> dict:
    r = client.post("/api/auth/register", json={"email": email or new_email(), "password": password})
    assert r.status_code == 201, r.text
    return r.json()


def bearer(auth: dict) -> dict:
    return {"Authorization": f"Bearer {auth['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return bearer(register(client))


@pytest.fixture
def other_headers(client):
    return bearer(register(client, new_email("other")))


def make_project(client: TestClient, headers: dict, **overrides) -> dict:
    body = {"name": "Website relaunch", "description": "Rebuild the marketing site", "status": "InProgress"}
    body.update(overrides)
    r = client.post("/api/projects", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def make_task(client: TestClient, headers: dict, project_id: str, **overrides) -> dict:
    body = {
        "title": "Write copy",
        "priority": "High",
        "state": "NotStarted",
        "due_date": "2030-01-15",
        "project_id": project_id,
    }
    body.update(overrides)
    r = client.post("/api/tasks", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()
