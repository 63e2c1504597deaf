"""
Yummy Catalog Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Validated document creation
- Statistics tracking
"""

import logging
from typing import Any

from pydantic import BaseModel

from database.models import build_payload
from database.store import UNIQUE_ID, Document, DocumentStore
from shared.config import StoreConfig

logger = logging.getLogger(__name__)


class BaseSeeder:
    """
    Base class for all seeders with common functionality.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, skipped, failed)
    - Generic create operation against one collection
    """

    def __init__(self, store: DocumentStore, config: StoreConfig):
        """
        Initialize the seeder.

        Args:
            store: The remote document store
            config: Database, bucket and collection identifiers
        """
        self.store = store
        self.config = config
        self.stats = {
            "created": 0,
            "skipped": 0,
            "failed": 0,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "skipped": 0, "failed": 0}

    def log_created(self, entity_type: str, name: str) -> None:
        """Log a created entity."""
        self.stats["created"] += 1
        logger.info(f"  + {entity_type} {name}: Created")

    def log_skipped(self, entity_type: str, name: str, reason: str) -> None:
        """Log a skipped entity with the reason operators need to fix the dataset."""
        self.stats["skipped"] += 1
        logger.warning(
            f"  ! {entity_type} {name}: Skipped ({reason})",
            extra={"item_name": name},
        )

    def log_failed(self, entity_type: str, name: str) -> None:
        """Count a failed entity (the error itself is logged by the caller)."""
        self.stats["failed"] += 1

    def log_summary(self, entity_type: str) -> None:
        """Log a summary of operations."""
        logger.info(
            f"  {entity_type}: {self.stats['created']} created, "
            f"{self.stats['skipped']} skipped, {self.stats['failed']} failed"
        )

    async def create(
        self,
        collection_id: str,
        model_class: type[BaseModel],
        data: dict[str, Any],
        entity_type: str = "Entity",
        name: str | None = None,
    ) -> Document:
        """
        Validate a payload and create it with a store-generated id.

        Args:
            collection_id: Target collection
            model_class: Document model the payload must match
            data: Payload fields
            entity_type: Name for logging (e.g., "Category", "Link")
            name: Identifier for logging

        Returns:
            The created document (including its generated id)

        Raises:
            PayloadValidationError: If the payload does not match the model
            StoreError: If the store rejects the create
        """
        payload = build_payload(model_class, data)
        document = await self.store.create_document(
            self.config.database_id,
            collection_id,
            UNIQUE_ID,
            payload,
        )
        self.log_created(entity_type, name or data.get("name", document.id))
        return document
