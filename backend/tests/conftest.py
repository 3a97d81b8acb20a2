"""Test fixtures for the Home Health API and scoring engine."""
from __future__ import annotations

import os

# must be set before homehealth.database creates its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from homehealth.database import Base, get_db
from homehealth.main import app
from homehealth.scoring import Reading, ScoringConfig, build_scoring_config


@pytest.fixture()
def config() -> ScoringConfig:
    return build_scoring_config()


@pytest.fixture()
def make_reading():
    def _make(metric_key: str, value, room_id: str | None = None) -> Reading:
        return Reading(property_id="p-1", metric_key=metric_key, value=value, room_id=room_id)
    return _make


@pytest.fixture()
def db_session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture()
def client(db_session: Session) -> Iterator[TestClient]:
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def property_id(client: TestClient) -> str:
    resp = client.post("/properties", json={"address": "12 Elm St", "city": "Houston", "state": "TX"})
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
