"""Firestore collection names.

Firestore creates collections on first write, so these constants are the
only place the names are defined. They are part of the contract with the
web client, which reads the same collections directly.
"""

COLLECTION_COMMUNITIES = "communities"
COLLECTION_MEMBERSHIPS = "community_memberships"
COLLECTION_USERS = "users"
