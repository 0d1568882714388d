"""
API layer for the User Accounts Backend.

Exposes HTTP endpoints under /api/users (listing, registration, verification,
profile read/update/delete) plus the centralized error handlers.
"""
