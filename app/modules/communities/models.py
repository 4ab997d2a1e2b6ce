# Firestore collection: communities
# This file documents the expected document shape
# Actual operations are handled via the Firestore SDK in service.py

"""
Expected Firestore document structure:

communities/{id}:
- id: str (document id, stable slug such as "global-chat")
- name: str
- description: str
- memberCount: int (denormalized, >= 0, only changed through update_member_count)
- color: str (UI color token, e.g. "bg-primary")
- category: str
- rules: array<str> (ordered)
- moderators: array<str> (ordered)
- isActive: bool
- createdAt: timestamp (server)
- updatedAt: timestamp (server, refreshed on every counter change)

Queries used:
- isActive == true ORDER BY memberCount DESC (needs a composite index)
"""
