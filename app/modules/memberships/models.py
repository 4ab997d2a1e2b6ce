# Firestore collection: community_memberships
# This file documents the expected document shape
# Actual operations are handled via the Firestore SDK in service.py

"""
Expected Firestore document structure:

community_memberships/{walletAddress}_{communityId}:
- walletAddress: str
- communityId: str (references communities/{id})
- joinedAt: timestamp (server)
- isActive: bool (always true on write; leaving deletes the document)

Queries used:
- walletAddress == ? AND isActive == true
"""
