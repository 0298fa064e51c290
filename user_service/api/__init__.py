"""
API layer for the user service.

Exposes the /users CRUD endpoints.
"""
