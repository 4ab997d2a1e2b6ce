"""Service account credentials for Google Cloud clients."""
import json
import logging
import os
from typing import Optional

from google.oauth2 import service_account

from app.config import settings

logger = logging.getLogger(__name__)


def get_gcp_credentials() -> Optional[service_account.Credentials]:
    """Build credentials from settings.gcp_service_account_key (inline JSON or a file path).

    Returns None when no key is configured so the client falls back to
    application default credentials (or the emulator when FIRESTORE_EMULATOR_HOST is set).
    """
    key = settings.gcp_service_account_key
    if not key:
        return None
    key = key.strip()
    if key.startswith("{"):
        info = json.loads(key)
        return service_account.Credentials.from_service_account_info(info)
    if os.path.isfile(key):
        return service_account.Credentials.from_service_account_file(key)
    logger.warning("gcp_service_account_key is neither JSON nor an existing file; using default credentials")
    return None
