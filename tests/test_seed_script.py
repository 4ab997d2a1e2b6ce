# tests/test_seed_script.py
"""Tests for the seed_communities command line entry point."""

import pytest

from app.config.communities_config import DEFAULT_COMMUNITY_IDS
from app.database.collections import COLLECTION_COMMUNITIES
from app.scripts import seed_communities


@pytest.fixture(autouse=True)
def use_fake_firestore(monkeypatch: pytest.MonkeyPatch, db) -> None:
    monkeypatch.setattr(seed_communities, "get_firestore", lambda: db)


def test_seed_script_creates_defaults(db) -> None:
    assert seed_communities.main([]) == 0
    assert set(db.docs(COLLECTION_COMMUNITIES)) == set(DEFAULT_COMMUNITY_IDS)


def test_seed_script_check_mode(db) -> None:
    assert seed_communities.main(["--check"]) == 1
    seed_communities.main([])
    assert seed_communities.main(["--check"]) == 0


def test_seed_script_reports_failure(db) -> None:
    db.fail_on("commit", RuntimeError("denied"))
    assert seed_communities.main([]) == 1
    assert db.docs(COLLECTION_COMMUNITIES) == {}
