"""
Yummy Catalog Collection Resetter.

Empties collections and the blob store before a seed run. Deletes inside
one collection run concurrently; a single failed delete fails the whole
clear (all-or-nothing per collection).
"""

import asyncio
import logging

from database.store import DocumentStore, Query
from shared.config import StoreConfig

logger = logging.getLogger(__name__)


class CollectionResetter:
    """Deletes every document of a collection, or every file of the bucket."""

    def __init__(self, store: DocumentStore, config: StoreConfig):
        self.store = store
        self.config = config

    async def clear_collection(self, collection_id: str) -> int:
        """
        Delete all documents listed in `collection_id`.

        Returns:
            Number of documents deleted (0 for an empty collection)

        Raises:
            StoreError: If listing or any delete fails
        """
        documents = await self.store.list_documents(
            self.config.database_id,
            collection_id,
            [Query.limit(self.config.list_limit)],
        )
        if not documents:
            logger.info(f"  Collection {collection_id}: already empty")
            return 0

        await asyncio.gather(
            *(
                self.store.delete_document(self.config.database_id, collection_id, doc.id)
                for doc in documents
            )
        )
        logger.info(
            f"  Collection {collection_id}: {len(documents)} documents deleted",
            extra={"collection_id": collection_id},
        )
        return len(documents)

    async def clear_blob_store(self) -> int:
        """
        Delete all files listed in the bucket.

        Returns:
            Number of files deleted (0 for an empty bucket)

        Raises:
            StoreError: If listing or any delete fails
        """
        bucket_id = self.config.bucket_id
        files = await self.store.list_files(bucket_id, [Query.limit(self.config.list_limit)])
        if not files:
            logger.info(f"  Bucket {bucket_id}: already empty")
            return 0

        await asyncio.gather(
            *(self.store.delete_file(bucket_id, f.id) for f in files)
        )
        logger.info(f"  Bucket {bucket_id}: {len(files)} files deleted")
        return len(files)

    async def reset_all(self) -> dict[str, int]:
        """
        Clear categories, customizations, menu and link collections (in that
        order), then the blob store. Collections are cleared one at a time.

        Returns:
            Deleted count keyed by collection id, plus the bucket id
        """
        deleted: dict[str, int] = {}
        for collection_id in self.config.collection_ids:
            deleted[collection_id] = await self.clear_collection(collection_id)
        deleted[self.config.bucket_id] = await self.clear_blob_store()
        return deleted
