from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from fastapi import HTTPException
from app.config import settings
from app.database.collections import COLLECTION_COMMUNITIES, COLLECTION_MEMBERSHIPS
from app.database.firestore_client import run_transaction
from app.modules.communities.service import CommunityService
from app.modules.memberships.schemas import AutoJoinResult, MembershipResponse
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


def get_membership_id(wallet_address: str, community_id: str) -> str:
    """Document ID of the membership linking wallet_address to community_id"""
    return f"{wallet_address}_{community_id}"


def _is_live(snapshot) -> bool:
    return snapshot.exists and snapshot.to_dict().get("isActive") is True


class MembershipService:
    """Membership ledger.

    A user is a member of a community when community_memberships holds a
    document for the pair with isActive true. Leaving deletes the document.
    Membership writes and memberCount changes are committed in the same
    transaction, so the counter always matches the number of live documents.
    """

    def __init__(self, db: firestore.Client):
        self.db = db
        self.communities = CommunityService(db)

    def _ref(self, wallet_address: str, community_id: str) -> firestore.DocumentReference:
        return self.db.collection(COLLECTION_MEMBERSHIPS)\
            .document(get_membership_id(wallet_address, community_id))

    def _community_ref(self, community_id: str) -> firestore.DocumentReference:
        return self.db.collection(COLLECTION_COMMUNITIES).document(community_id)

    @staticmethod
    def _new_membership(wallet_address: str, community_id: str) -> dict:
        return {
            "walletAddress": wallet_address,
            "communityId": community_id,
            "joinedAt": firestore.SERVER_TIMESTAMP,
            "isActive": True,
        }

    def _join_txn(self, transaction, wallet_address: str, community_id: str) -> bool:
        membership_ref = self._ref(wallet_address, community_id)
        if _is_live(membership_ref.get(transaction=transaction)):
            return False
        if not self._community_ref(community_id).get(transaction=transaction).exists:
            raise HTTPException(status_code=404, detail="Community not found")
        transaction.set(membership_ref, self._new_membership(wallet_address, community_id))
        self.communities.update_member_count(community_id, 1, writer=transaction)
        return True

    def _leave_txn(self, transaction, wallet_address: str, community_id: str) -> bool:
        membership_ref = self._ref(wallet_address, community_id)
        if not _is_live(membership_ref.get(transaction=transaction)):
            return False
        community = self._community_ref(community_id).get(transaction=transaction)
        transaction.delete(membership_ref)
        # Clamp at zero: skip the decrement if the counter has already drifted there
        if community.exists and (community.to_dict().get("memberCount") or 0) > 0:
            self.communities.update_member_count(community_id, -1, writer=transaction)
        return True

    def _join_many_txn(self, transaction, wallet_address: str, community_ids: List[str]) -> List[str]:
        pending = []
        missing = []
        for community_id in dict.fromkeys(community_ids):
            if _is_live(self._ref(wallet_address, community_id).get(transaction=transaction)):
                continue
            if not self._community_ref(community_id).get(transaction=transaction).exists:
                missing.append(community_id)
                continue
            pending.append(community_id)
        if missing:
            raise HTTPException(status_code=404, detail=f"Community not found: {', '.join(missing)}")
        for community_id in pending:
            transaction.set(
                self._ref(wallet_address, community_id),
                self._new_membership(wallet_address, community_id),
            )
            self.communities.update_member_count(community_id, 1, writer=transaction)
        return pending

    def join_community(self, wallet_address: str, community_id: str) -> MembershipResponse:
        """Join a community; an existing live membership is returned unchanged"""
        joined = run_transaction(self.db, self._join_txn, wallet_address, community_id)
        if joined:
            logger.info(f"User {wallet_address} joined {community_id}")
        else:
            logger.debug(f"User {wallet_address} already a member of {community_id}")
        return self.get_community_membership(wallet_address, community_id)

    def leave_community(self, wallet_address: str, community_id: str) -> bool:
        """Leave a community. Returns False when there was no membership to remove."""
        left = run_transaction(self.db, self._leave_txn, wallet_address, community_id)
        if left:
            logger.info(f"User {wallet_address} left {community_id}")
        return left

    def is_community_member(self, wallet_address: str, community_id: str) -> bool:
        return _is_live(self._ref(wallet_address, community_id).get())

    def get_user_communities(self, wallet_address: str) -> List[str]:
        """IDs of all communities the user currently belongs to"""
        query = self.db.collection(COLLECTION_MEMBERSHIPS)\
            .where(filter=FieldFilter("walletAddress", "==", wallet_address))\
            .where(filter=FieldFilter("isActive", "==", True))
        return [doc.to_dict()["communityId"] for doc in query.stream()]

    def get_community_membership(self, wallet_address: str, community_id: str) -> Optional[MembershipResponse]:
        snapshot = self._ref(wallet_address, community_id).get()
        if not snapshot.exists:
            return None
        return MembershipResponse(id=snapshot.id, **snapshot.to_dict())

    def join_multiple_communities(self, wallet_address: str, community_ids: List[str]) -> List[str]:
        """Join several communities at once; returns the IDs that were newly joined.

        Communities the user already belongs to are skipped and their counters
        left alone. Any unknown community ID aborts the whole request.
        """
        if not community_ids:
            return []
        joined = run_transaction(self.db, self._join_many_txn, wallet_address, list(community_ids))
        if joined:
            logger.info(f"User {wallet_address} joined {len(joined)} communities: {joined}")
        return joined

    def auto_join_default(self, wallet_address: str, community_id: Optional[str] = None) -> AutoJoinResult:
        """Best-effort join of the default community after registration.

        Never raises: any failure is reported in the returned result so that
        registration can carry on.
        """
        community_id = community_id or settings.default_community_id
        result = AutoJoinResult(wallet_address=wallet_address, community_id=community_id)
        try:
            if self.is_community_member(wallet_address, community_id):
                result.already_member = True
            else:
                self.join_community(wallet_address, community_id)
                result.joined = True
        except Exception as e:
            result.error = str(e)
        return result
