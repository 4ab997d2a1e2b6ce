from google.api_core.exceptions import NotFound
from google.cloud import firestore
from fastapi import HTTPException
from app.database.collections import COLLECTION_USERS
from app.modules.users.schemas import UserCreate, UserUpdate, UserResponse
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: firestore.Client):
        self.db = db

    def _ref(self, wallet_address: str) -> firestore.DocumentReference:
        # Wallet address is the document id (uid)
        return self.db.collection(COLLECTION_USERS).document(wallet_address)

    def create_user(self, user_data: UserCreate) -> UserResponse:
        """Create a new user keyed by wallet address"""
        ref = self._ref(user_data.wallet_address)
        user = {
            "walletAddress": user_data.wallet_address,
            "username": user_data.username,
            "isVerified": user_data.is_verified,
            "firstLogin": firestore.SERVER_TIMESTAMP,
            "lastLogin": firestore.SERVER_TIMESTAMP,
            "createdAt": firestore.SERVER_TIMESTAMP,
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }
        if user_data.profile_picture_url is not None:
            user["profilePictureUrl"] = user_data.profile_picture_url
        ref.set(user)
        logger.info(f"Created user {user_data.wallet_address}")
        return self.get_user_by_address(user_data.wallet_address)

    def get_user_by_address(self, wallet_address: str) -> Optional[UserResponse]:
        snapshot = self._ref(wallet_address).get()
        if not snapshot.exists:
            return None
        return UserResponse(uid=snapshot.id, **snapshot.to_dict())

    def user_exists(self, wallet_address: str) -> bool:
        return self._ref(wallet_address).get().exists

    def update_user(self, wallet_address: str, user_data: UserUpdate, touch_last_login: bool = False) -> None:
        """Partial update; only fields that are set are written"""
        update_data = {"updatedAt": firestore.SERVER_TIMESTAMP}
        if user_data.username is not None:
            update_data["username"] = user_data.username
        if user_data.profile_picture_url is not None:
            update_data["profilePictureUrl"] = user_data.profile_picture_url
        if user_data.is_verified is not None:
            update_data["isVerified"] = user_data.is_verified
        if touch_last_login:
            update_data["lastLogin"] = firestore.SERVER_TIMESTAMP
        try:
            self._ref(wallet_address).update(update_data)
        except NotFound:
            raise HTTPException(status_code=404, detail="User not found")

    def update_last_login(self, wallet_address: str) -> None:
        self.update_user(wallet_address, UserUpdate(), touch_last_login=True)

    def create_or_update_user(self, user_data: UserCreate) -> UserResponse:
        """Upsert: refresh profile and lastLogin of a known wallet, otherwise create it"""
        if not self.user_exists(user_data.wallet_address):
            return self.create_user(user_data)
        self.update_user(
            user_data.wallet_address,
            UserUpdate(
                username=user_data.username,
                profile_picture_url=user_data.profile_picture_url,
                is_verified=user_data.is_verified,
            ),
            touch_last_login=True,
        )
        return self.get_user_by_address(user_data.wallet_address)
