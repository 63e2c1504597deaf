"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- An in-memory DocumentStore with failure injection
- Store / placeholder configuration fixtures
- Small catalog datasets
"""

import itertools
import logging
from typing import Any, Callable

import pytest

from database.store import UNIQUE_ID, Document, FileDescriptor, StoredFile
from shared.config import PlaceholderConfig, StoreConfig
from shared.errors import StoreError


# =============================================================================
# IN-MEMORY STORE
# =============================================================================


class InMemoryStore:
    """
    DocumentStore fake keeping documents and files in dicts.

    Failure injection:
    - fail_list: collection/bucket ids whose listing raises
    - fail_delete: document/file ids whose delete raises
    - fail_create: collection id -> predicate(payload) that raises when true
    - fail_upload: every create_file raises
    - fail_view_url: get_file_view_url raises
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.files: dict[str, dict[str, StoredFile]] = {}
        self.uploads: list[FileDescriptor] = []
        self.calls: list[tuple[str, str]] = []
        self._ids = itertools.count(1)

        self.fail_list: set[str] = set()
        self.fail_delete: set[str] = set()
        self.fail_create: dict[str, Callable[[dict[str, Any]], bool]] = {}
        self.fail_upload = False
        self.fail_view_url = False

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._ids)}"

    def docs(self, collection_id: str) -> list[dict[str, Any]]:
        """Stored payloads of a collection, with their ids under `$id`."""
        return [
            {"$id": doc_id, **payload}
            for doc_id, payload in self.collections.get(collection_id, {}).items()
        ]

    def insert(self, collection_id: str, payload: dict[str, Any]) -> str:
        """Put a document in place directly (pre-existing data)."""
        doc_id = self._next_id("old")
        self.collections.setdefault(collection_id, {})[doc_id] = dict(payload)
        return doc_id

    def insert_file(self, bucket_id: str, name: str = "old.png") -> str:
        file_id = self._next_id("oldfile")
        self.files.setdefault(bucket_id, {})[file_id] = StoredFile(**{"$id": file_id, "name": name})
        return file_id

    async def list_documents(self, database_id, collection_id, queries=None):
        self.calls.append(("list_documents", collection_id))
        if collection_id in self.fail_list:
            raise StoreError("list_documents", "listing refused", 500)
        return [Document.model_validate(doc) for doc in self.docs(collection_id)]

    async def create_document(self, database_id, collection_id, document_id, data):
        self.calls.append(("create_document", collection_id))
        predicate = self.fail_create.get(collection_id)
        if predicate is not None and predicate(data):
            raise StoreError("create_document", "document rejected", 400)
        assert document_id == UNIQUE_ID
        doc_id = self._next_id("doc")
        self.collections.setdefault(collection_id, {})[doc_id] = dict(data)
        return Document.model_validate({"$id": doc_id, **data})

    async def delete_document(self, database_id, collection_id, document_id):
        self.calls.append(("delete_document", collection_id))
        if document_id in self.fail_delete:
            raise StoreError("delete_document", "delete refused", 500)
        del self.collections[collection_id][document_id]

    async def list_files(self, bucket_id, queries=None):
        self.calls.append(("list_files", bucket_id))
        if bucket_id in self.fail_list:
            raise StoreError("list_files", "listing refused", 500)
        return list(self.files.get(bucket_id, {}).values())

    async def create_file(self, bucket_id, file_id, file):
        self.calls.append(("create_file", bucket_id))
        if self.fail_upload:
            raise StoreError("create_file", "upload refused", 503)
        new_id = self._next_id("file")
        stored = StoredFile(**{"$id": new_id, "name": file.name, "mimeType": file.content_type})
        self.files.setdefault(bucket_id, {})[new_id] = stored
        self.uploads.append(file)
        return stored

    async def delete_file(self, bucket_id, file_id):
        self.calls.append(("delete_file", bucket_id))
        if file_id in self.fail_delete:
            raise StoreError("delete_file", "delete refused", 500)
        del self.files[bucket_id][file_id]

    def get_file_view_url(self, bucket_id, file_id):
        if self.fail_view_url:
            raise RuntimeError("view url unavailable")
        return f"https://store.test/v1/storage/buckets/{bucket_id}/files/{file_id}/view?project=test"


# =============================================================================
# CONFIGURATION FIXTURES
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(
        endpoint="https://store.test/v1",
        project_id="test-project",
        api_key="secret-key",
        database_id="db",
        bucket_id="bucket",
        categories_collection_id="categories",
        customizations_collection_id="customizations",
        menu_collection_id="menu",
        menu_customizations_collection_id="menu_customizations",
        timeout_seconds=5.0,
        list_limit=100,
    )


@pytest.fixture
def placeholder_config() -> PlaceholderConfig:
    return PlaceholderConfig()


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


# =============================================================================
# DATASET FIXTURES
# =============================================================================


def make_item(name: str, category_name: str, customizations: list[str] | None = None, **overrides):
    item = {
        "name": name,
        "description": f"{name} description",
        "image_url": f"https://images.test/menu/{name.lower().replace(' ', '-')}.png",
        "price": 10.5,
        "rating": 4.5,
        "calories": 500,
        "protein": 20,
        "category_name": category_name,
        "customizations": customizations or [],
    }
    item.update(overrides)
    return item


@pytest.fixture
def item_factory():
    """Build a valid source menu item; keyword overrides replace fields."""
    return make_item


@pytest.fixture
def pizza_catalog():
    """One category, one customization, one item that links them."""
    return {
        "categories": [{"name": "Pizza", "description": "Oven-baked"}],
        "customizations": [{"name": "Extra Cheese", "price": 1.5, "type": "topping"}],
        "menu": [make_item("Margherita", "Pizza", ["Extra Cheese"])],
    }


# =============================================================================
# MARKERS
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that run a full seed cycle"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
