import os

# keep the lifespan's create_all away from a file on disk
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import StaticPool

from hospital_assets.main import app
from hospital_assets.db import get_session

ADMIN = {"X-User-Role": "admin"}
REGULAR = {"X-User-Role": "regular"}


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(client):
    def _make(username="nina", email=None, role="regular", department="ICU"):
        r = client.post(
            "/users",
            json={
                "username": username,
                "email": email or f"{username}@x.org",
                "role": role,
                "department": department,
            },
            headers=ADMIN,
        )
        assert r.status_code == 200, r.text
        return r.json()
    return _make


@pytest.fixture()
def make_asset(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        body = {
            "name": "Infusion Pump",
            "type": "medical_equipment",
            "department": "ICU",
            "location": "Bay 3",
            "serial_number": f"SN-{counter['n']:04d}",
            "purchase_date": "2023-05-01T00:00:00",
            "status": "active",
            "assigned_user_id": None,
        }
        body.update(overrides)
        r = client.post("/assets", json=body, headers=ADMIN)
        assert r.status_code == 200, r.text
        return r.json()
    return _make
