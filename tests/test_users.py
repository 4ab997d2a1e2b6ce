# tests/test_users.py
"""Tests for user registration and profile updates."""

import pytest
from fastapi import HTTPException, status

from app.database.collections import COLLECTION_COMMUNITIES, COLLECTION_USERS
from app.modules.users.schemas import UserCreate, UserUpdate
from tests.conftest import WALLET


def _user(**overrides) -> UserCreate:
    data = {"wallet_address": WALLET, "username": "alice", "is_verified": True}
    data.update(overrides)
    return UserCreate(**data)


def test_create_user_sets_all_timestamps(user_service, db) -> None:
    user = user_service.create_user(_user())

    assert user.uid == WALLET
    assert user.wallet_address == WALLET
    assert user.username == "alice"
    assert user.profile_picture_url is None
    assert None not in (user.first_login, user.last_login, user.created_at, user.updated_at)
    assert "profilePictureUrl" not in db.docs(COLLECTION_USERS)[WALLET]


def test_get_user_by_address_missing(user_service) -> None:
    assert user_service.get_user_by_address("0xNOPE") is None
    assert user_service.user_exists("0xNOPE") is False


def test_update_user_only_writes_given_fields(user_service) -> None:
    user_service.create_user(_user(profile_picture_url="https://img/a.png"))

    user_service.update_user(WALLET, UserUpdate(username="alice2"))

    user = user_service.get_user_by_address(WALLET)
    assert user.username == "alice2"
    assert user.profile_picture_url == "https://img/a.png"
    assert user.is_verified is True


def test_update_missing_user_raises_404(user_service) -> None:
    with pytest.raises(HTTPException) as exc_info:
        user_service.update_user("0xNOPE", UserUpdate(username="x"))
    assert exc_info.value.status_code == 404


def test_update_last_login(user_service) -> None:
    created = user_service.create_user(_user())

    user_service.update_last_login(WALLET)

    user = user_service.get_user_by_address(WALLET)
    assert user.last_login >= created.last_login
    assert user.first_login == created.first_login


def test_create_or_update_user_upserts(user_service, db) -> None:
    created = user_service.create_or_update_user(_user())
    updated = user_service.create_or_update_user(_user(username="renamed", is_verified=False))

    assert list(db.docs(COLLECTION_USERS)) == [WALLET]
    assert updated.username == "renamed"
    assert updated.is_verified is False
    assert updated.created_at == created.created_at
    assert updated.last_login >= created.last_login


def test_register_endpoint_auto_joins_global_chat(client, seeded_db) -> None:
    response = client.post(
        "/api/v1/users",
        json={"walletAddress": WALLET, "username": "alice", "isVerified": True},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["uid"] == WALLET

    membership = client.get(f"/api/v1/communities/global-chat/members/{WALLET}").json()
    assert membership["isMember"] is True
    assert seeded_db.docs(COLLECTION_COMMUNITIES)["global-chat"]["memberCount"] == 1


def test_register_twice_counts_member_once(client, seeded_db) -> None:
    body = {"walletAddress": WALLET, "username": "alice", "isVerified": True}
    client.post("/api/v1/users", json=body)
    client.post("/api/v1/users", json=body)

    assert seeded_db.docs(COLLECTION_COMMUNITIES)["global-chat"]["memberCount"] == 1


def test_register_succeeds_when_auto_join_fails(client, db) -> None:
    # No communities seeded: the default community does not exist
    response = client.post(
        "/api/v1/users",
        json={"walletAddress": WALLET, "username": "alice", "isVerified": False},
    )
    assert response.status_code == status.HTTP_200_OK
    assert WALLET in db.docs(COLLECTION_USERS)


def test_get_user_endpoint(client) -> None:
    assert client.get(f"/api/v1/users/{WALLET}").status_code == status.HTTP_404_NOT_FOUND

    client.post("/api/v1/users", json={"walletAddress": WALLET, "username": "alice"})

    response = client.get(f"/api/v1/users/{WALLET}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["username"] == "alice"


def test_update_user_endpoint(client) -> None:
    client.post("/api/v1/users", json={"walletAddress": WALLET, "username": "alice"})

    response = client.put(f"/api/v1/users/{WALLET}", json={"profilePictureUrl": "https://img/b.png"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["profilePictureUrl"] == "https://img/b.png"
    assert response.json()["username"] == "alice"


def test_update_unknown_user_endpoint(client) -> None:
    response = client.put("/api/v1/users/0xNOPE", json={"username": "x"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_record_login_endpoint(client) -> None:
    client.post("/api/v1/users", json={"walletAddress": WALLET, "username": "alice"})
    assert client.post(f"/api/v1/users/{WALLET}/login").status_code == status.HTTP_204_NO_CONTENT
