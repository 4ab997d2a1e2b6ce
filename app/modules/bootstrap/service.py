from google.cloud import firestore
from app.config.communities_config import DEFAULT_COMMUNITIES
from app.database.collections import COLLECTION_COMMUNITIES
from app.modules.communities.schemas import CommunityCreate
from app.modules.communities.service import CommunityService
from typing import List, Sequence
import logging

logger = logging.getLogger(__name__)


class BootstrapService:
    """Seeds the default communities and reports whether they are in place."""

    def __init__(self, db: firestore.Client, defaults: Sequence[CommunityCreate] = DEFAULT_COMMUNITIES):
        self.db = db
        self.defaults = tuple(defaults)
        self.communities = CommunityService(db)

    def initialize_default_communities(self) -> List[str]:
        """Insert the default communities that do not exist yet, in one atomic batch.

        Existing communities are left untouched, including their rules and
        moderators. Returns the IDs that were created.
        """
        batch = self.db.batch()
        created = []
        for community_data in self.defaults:
            ref = self.db.collection(COLLECTION_COMMUNITIES).document(community_data.id)
            if ref.get().exists:
                logger.debug(f"Community {community_data.id} already exists, skipping")
                continue
            batch.set(ref, CommunityService.new_community_document(community_data))
            created.append(community_data.id)
        if created:
            batch.commit()
        logger.info(f"Default communities initialized: {len(created)} created, {len(self.defaults) - len(created)} existing")
        return created

    def initialize(self) -> List[str]:
        """Initialize the database with default data"""
        logger.info("Initializing Firestore with default data...")
        try:
            created = self.initialize_default_communities()
        except Exception as e:
            logger.error(f"Firestore initialization error: {e}")
            raise
        logger.info("Firestore initialization completed successfully")
        return created

    def check_initialization(self, strict: bool = False) -> bool:
        """True when every default community is present in the active list.

        Store errors are logged and reported as False unless strict is set,
        in which case they propagate to the caller.
        """
        try:
            existing_ids = {c.id for c in self.communities.get_all_communities()}
        except Exception as e:
            logger.error(f"Error checking Firestore initialization: {e}")
            if strict:
                raise
            return False
        return all(c.id in existing_ids for c in self.defaults)
