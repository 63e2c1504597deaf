"""
Yummy Catalog - Run the seed.

Wipes the categories, customizations, menu and menu-customization
collections plus the image bucket, then rebuilds them from the dataset:
- data/: Seed data definitions (bundled dataset or SEED_DATA_FILE)
- seeders/: Reusable seeding logic

Run with: python -m database.seeds.run_all_seeds
"""

import asyncio
import logging
import sys

from database.connection import get_store
from database.seeds.data import CatalogData, load_catalog_data
from database.seeds.seeders import CatalogSeeder, SeedReport
from shared.config import PlaceholderConfig, Settings, StoreConfig, get_settings
from shared.errors import CatalogSeedError
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def seed(
    data: CatalogData | None = None,
    settings: Settings | None = None,
) -> SeedReport:
    """
    Run one full reset-and-seed cycle.

    Args:
        data: Dataset to seed; loaded from settings when omitted
        settings: Settings to build configs from; cached settings when omitted

    Returns:
        SeedReport for the run

    Raises:
        SeedAbortedError: If a fatal phase failed
        DatasetError: If the dataset file could not be loaded
    """
    settings = settings or get_settings()
    store_config = StoreConfig.from_settings(settings)
    placeholder_config = PlaceholderConfig.from_settings(settings)

    if data is None:
        data = load_catalog_data(settings.SEED_DATA_FILE)

    async with get_store(store_config) as store:
        seeder = CatalogSeeder(store, store_config, placeholder_config)
        return await seeder.seed(data)


async def main() -> int:
    """Main entry point."""
    configure_logging()
    try:
        report = await seed()
    except CatalogSeedError as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        return 1

    if report.failed_items:
        logger.warning(f"{len(report.failed_items)} menu items failed; see errors above")
    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
