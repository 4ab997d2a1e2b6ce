"""
Seed Default Communities Script
This script inserts the default communities that are missing from Firestore.
Existing communities are never modified. Can be run manually or from a deploy job.
"""

import argparse
import sys
import logging

from app.config.communities_config import DEFAULT_COMMUNITIES
from app.database.firestore_client import get_firestore
from app.modules.bootstrap.service import BootstrapService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Seed the default communities; with --check only report whether seeding is needed"""
    parser = argparse.ArgumentParser(description="Seed the default communities into Firestore")
    parser.add_argument("--check", action="store_true", help="only report whether all defaults exist")
    args = parser.parse_args(argv)

    try:
        service = BootstrapService(get_firestore(), DEFAULT_COMMUNITIES)

        if args.check:
            initialized = service.check_initialization()
            logger.info("Default communities present" if initialized else "Default communities missing")
            return 0 if initialized else 1

        created = service.initialize()
        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {len(created)} created, {len(DEFAULT_COMMUNITIES) - len(created)} already present")
        return 0
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
