# Firestore collection: users
# This file documents the expected document shape
# Actual operations are handled via the Firestore SDK in service.py
# Wallet ownership is verified upstream; this collection only stores profile information

"""
Expected Firestore document structure:

users/{walletAddress}:
- walletAddress: str (also the document id / uid)
- username: str
- profilePictureUrl: str (optional)
- isVerified: bool
- firstLogin: timestamp (server, set once)
- lastLogin: timestamp (server, refreshed on every login)
- createdAt: timestamp (server)
- updatedAt: timestamp (server)
"""
