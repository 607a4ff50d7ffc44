"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.catalog_service import CatalogService
from services.validation_service import ensure_name_available, name_conflict_exists

__all__ = [
    "CatalogService",
    "ensure_name_available",
    "name_conflict_exists",
]
