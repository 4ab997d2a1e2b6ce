from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from app.database.collections import COLLECTION_COMMUNITIES
from app.modules.communities.schemas import CommunityCreate, CommunityResponse
from typing import List, Optional, Union
import logging

logger = logging.getLogger(__name__)

Writer = Union[firestore.WriteBatch, firestore.Transaction]


class CommunityService:
    def __init__(self, db: firestore.Client):
        self.db = db

    def _ref(self, community_id: str) -> firestore.DocumentReference:
        return self.db.collection(COLLECTION_COMMUNITIES).document(community_id)

    @staticmethod
    def new_community_document(community_data: CommunityCreate) -> dict:
        """Document body for a freshly created community: zero members, server timestamps."""
        return {
            "name": community_data.name,
            "description": community_data.description,
            "memberCount": 0,
            "color": community_data.color,
            "category": community_data.category,
            "rules": list(community_data.rules),
            "moderators": list(community_data.moderators),
            "isActive": community_data.is_active,
            "createdAt": firestore.SERVER_TIMESTAMP,
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }

    def create_community(self, community_data: CommunityCreate) -> CommunityResponse:
        """Create (or overwrite) a community. Callers check existence first."""
        ref = self._ref(community_data.id)
        ref.set(self.new_community_document(community_data))
        logger.info(f"Created community {community_data.id}")
        return CommunityResponse(id=community_data.id, **ref.get().to_dict())

    def get_community_by_id(self, community_id: str) -> Optional[CommunityResponse]:
        """Get community by ID, or None when it does not exist"""
        snapshot = self._ref(community_id).get()
        if not snapshot.exists:
            return None
        return CommunityResponse(id=snapshot.id, **snapshot.to_dict())

    def community_exists(self, community_id: str) -> bool:
        return self._ref(community_id).get().exists

    def get_all_communities(self) -> List[CommunityResponse]:
        """List active communities, most members first"""
        query = self.db.collection(COLLECTION_COMMUNITIES)\
            .where(filter=FieldFilter("isActive", "==", True))\
            .order_by("memberCount", direction=firestore.Query.DESCENDING)
        return [CommunityResponse(id=doc.id, **doc.to_dict()) for doc in query.stream()]

    def update_member_count(self, community_id: str, delta: int, writer: Optional[Writer] = None) -> None:
        """Apply an atomic increment to memberCount and refresh updatedAt.

        With a batch or transaction the write is staged there and committed by the
        caller; otherwise it is committed immediately. No floor is enforced here.
        """
        payload = {
            "memberCount": firestore.Increment(delta),
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }
        if writer is not None:
            writer.update(self._ref(community_id), payload)
            return
        batch = self.db.batch()
        batch.update(self._ref(community_id), payload)
        batch.commit()
        logger.debug(f"memberCount of {community_id} changed by {delta}")
