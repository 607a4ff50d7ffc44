"""
Repositories - Data access layer for database operations.
"""

from models.repositories.entity_store import EntityStore, identity_of, primary_key_of

__all__ = ["EntityStore", "identity_of", "primary_key_of"]
