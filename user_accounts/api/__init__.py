"""
API layer for the user accounts backend.

Exposes the HTTP endpoints under /api (sign-up, sign-in, external
sign-in, profile read and update).
"""
