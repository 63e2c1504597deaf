"""
Yummy Catalog - Validation script for seeded data.

Verifies referential integrity of what is stored in the remote
collections after a seed run.

Run with: python -m database.seeds.validate_seed
"""

import asyncio
import logging
import sys

from pydantic import BaseModel, Field

from database.connection import get_store
from database.store import DocumentStore, Query
from shared.config import StoreConfig, get_settings
from shared.errors import CatalogSeedError
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    """Counts per collection and every integrity problem found."""

    counts: dict[str, int] = Field(default_factory=dict)
    problems: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.problems


async def validate_seed(store: DocumentStore, config: StoreConfig) -> ValidationReport:
    """Validate stored catalog completeness and references."""
    report = ValidationReport()
    limit = [Query.limit(config.list_limit)]

    async def list_all(collection_id: str):
        return await store.list_documents(config.database_id, collection_id, limit)

    logger.info("=" * 80)
    logger.info("VALIDATING SEEDED CATALOG")
    logger.info("=" * 80)

    categories = await list_all(config.categories_collection_id)
    customizations = await list_all(config.customizations_collection_id)
    menu = await list_all(config.menu_collection_id)
    links = await list_all(config.menu_customizations_collection_id)
    files = await store.list_files(config.bucket_id, limit)

    report.counts = {
        "categories": len(categories),
        "customizations": len(customizations),
        "menu": len(menu),
        "menu_customizations": len(links),
        "files": len(files),
    }

    # Check 1: something was seeded
    logger.info("\n[CHECK 1] Collections populated")
    for name in ("categories", "customizations", "menu"):
        if report.counts[name] == 0:
            report.problems.append(f"Collection {name} is empty")
            logger.error(f"✗ {name}: empty")
        else:
            logger.info(f"✓ {name}: {report.counts[name]} documents")

    # Check 2: menu -> category
    logger.info("\n[CHECK 2] Menu items reference existing categories")
    category_ids = {doc.id for doc in categories}
    for doc in menu:
        if doc.get("categories") not in category_ids:
            report.problems.append(
                f"Menu item {doc.get('name', doc.id)} references missing category {doc.get('categories')}"
            )
    logger.info(f"  {len(menu)} menu items checked")

    # Check 3: link -> menu, link -> customization
    logger.info("\n[CHECK 3] Links reference existing menu items and customizations")
    menu_ids = {doc.id for doc in menu}
    customization_ids = {doc.id for doc in customizations}
    for doc in links:
        if doc.get("menu") not in menu_ids:
            report.problems.append(f"Link {doc.id} references missing menu item {doc.get('menu')}")
        if doc.get("customizations") not in customization_ids:
            report.problems.append(
                f"Link {doc.id} references missing customization {doc.get('customizations')}"
            )
    logger.info(f"  {len(links)} links checked")

    # Check 4: duplicate natural keys (allowed, but worth flagging)
    logger.info("\n[CHECK 4] Duplicate names")
    for label, docs in (("category", categories), ("customization", customizations)):
        seen: set[str] = set()
        for doc in docs:
            name = doc.get("name")
            if name in seen:
                logger.warning(f"⚠ Duplicate {label} name: {name}")
            seen.add(name)

    logger.info("\n" + "=" * 80)
    if report.ok:
        logger.info("✓ VALIDATION COMPLETE")
    else:
        for problem in report.problems:
            logger.error(f"✗ {problem}")
        logger.error(f"✗ VALIDATION FAILED: {len(report.problems)} problem(s)")
    logger.info("=" * 80)

    return report


async def main() -> int:
    """Main entry point."""
    configure_logging()
    config = StoreConfig.from_settings(get_settings())
    try:
        async with get_store(config) as store:
            report = await validate_seed(store, config)
        return 0 if report.ok else 1
    except CatalogSeedError as e:
        logger.error(f"Validation failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
