"""
Yummy Catalog - Database module.

This module contains the remote store boundary, the per-collection
document models and the store connection helper.
"""

from database.connection import get_store
from database.models import (
    CategoryDoc,
    CustomizationDoc,
    MenuCustomizationLinkDoc,
    MenuItemDoc,
    build_payload,
)
from database.store import (
    UNIQUE_ID,
    AppwriteStore,
    Document,
    DocumentStore,
    FileDescriptor,
    Query,
    StoredFile,
)

__all__ = [
    "get_store",
    "AppwriteStore",
    "DocumentStore",
    "Document",
    "StoredFile",
    "FileDescriptor",
    "Query",
    "UNIQUE_ID",
    "CategoryDoc",
    "CustomizationDoc",
    "MenuItemDoc",
    "MenuCustomizationLinkDoc",
    "build_payload",
]
