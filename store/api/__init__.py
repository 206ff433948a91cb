"""
API layer for the store backend.

Exposes the HTTP endpoints for users, products and the greeting message,
plus the translation of errors into responses.
"""
