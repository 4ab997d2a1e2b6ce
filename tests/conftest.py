# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config.communities_config import DEFAULT_COMMUNITIES
from app.database import firestore_client
from app.database.firestore_client import get_firestore
from app.main import app as fastapi_app, limiter
from app.modules.bootstrap.service import BootstrapService
from app.modules.communities.service import CommunityService
from app.modules.memberships.service import MembershipService
from app.modules.users.service import UserService
from tests.firestore_fake import FakeFirestore, fake_transactional

WALLET = "0xABC"


@pytest.fixture()
def db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture(autouse=True)
def patch_transactional(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(firestore_client, "transactional", fake_transactional)


@pytest.fixture()
def seeded_db(db: FakeFirestore) -> FakeFirestore:
    BootstrapService(db, DEFAULT_COMMUNITIES).initialize_default_communities()
    return db


@pytest.fixture()
def community_service(seeded_db: FakeFirestore) -> CommunityService:
    return CommunityService(seeded_db)


@pytest.fixture()
def membership_service(seeded_db: FakeFirestore) -> MembershipService:
    return MembershipService(seeded_db)


@pytest.fixture()
def user_service(db: FakeFirestore) -> UserService:
    return UserService(db)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_firestore_dependency(app: FastAPI, db: FakeFirestore) -> Iterator[None]:
    app.dependency_overrides[get_firestore] = lambda: db
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_firestore, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    limiter.reset()
