from typing import Any, Callable, TypeVar

from google.cloud import firestore
from google.cloud.firestore import transactional

from app.config import settings
from app.core.gcp_credentials import get_gcp_credentials

T = TypeVar("T")


class FirestoreClient:
    _client: firestore.Client = None

    @classmethod
    def get_client(cls) -> firestore.Client:
        if cls._client is None:
            kwargs = {"project": settings.firebase_project_id}
            if settings.firestore_database:
                kwargs["database"] = settings.firestore_database
            creds = get_gcp_credentials()
            if creds:
                kwargs["credentials"] = creds
            cls._client = firestore.Client(**kwargs)
        return cls._client

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_firestore() -> firestore.Client:
    return FirestoreClient.get_client()


def run_transaction(db: firestore.Client, callback: Callable[..., T], *args: Any) -> T:
    """Run callback(transaction, *args) in a Firestore transaction; retried on contention.

    All reads in callback must happen before its first write.
    """
    transaction = db.transaction()
    return transactional(callback)(transaction, *args)
