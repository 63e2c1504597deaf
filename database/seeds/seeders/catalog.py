"""
Yummy Catalog Seeder.

Runs the full reset-then-repopulate cycle, one phase at a time:

1. Reset: clear categories, customizations, menu, links, then the bucket
2. Categories        -> category_map
3. Customizations    -> customization_map
4. Menu items + links (per-item isolation)
5. Summary

Phases 1-3 are fatal: a failure raises SeedAbortedError with the original
error chained. Phase 4 never aborts the run.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from pydantic import BaseModel, Field

from database.seeds.data.common import CatalogData
from database.seeds.seeders.category import CategorySeeder, CustomizationSeeder
from database.seeds.seeders.image import ImageMaterializer
from database.seeds.seeders.menu import MenuSeeder
from database.seeds.seeders.reset import CollectionResetter
from database.store import DocumentStore
from shared.config import PlaceholderConfig, StoreConfig
from shared.errors import ErrorCategory, SeedAbortedError, get_error_logger

logger = logging.getLogger(__name__)
error_logger = get_error_logger()

T = TypeVar("T")


class SeedReport(BaseModel):
    """Outcome of one seed run. The maps are only valid for this run."""

    deleted: dict[str, int] = Field(default_factory=dict)
    categories_created: int = 0
    customizations_created: int = 0
    menu_items_created: int = 0
    links_created: int = 0
    links_skipped: int = 0
    skipped_items: list[str] = Field(default_factory=list)
    failed_items: list[str] = Field(default_factory=list)
    images_uploaded: int = 0
    images_placeholder: int = 0
    category_map: dict[str, str] = Field(default_factory=dict)
    customization_map: dict[str, str] = Field(default_factory=dict)
    menu_map: dict[str, str] = Field(default_factory=dict)


class CatalogSeeder:
    """Orchestrates the reset and the four seeding phases."""

    def __init__(
        self,
        store: DocumentStore,
        config: StoreConfig,
        placeholder: PlaceholderConfig,
    ):
        self.store = store
        self.config = config
        self.resetter = CollectionResetter(store, config)
        self.category_seeder = CategorySeeder(store, config)
        self.customization_seeder = CustomizationSeeder(store, config)
        self.menu_seeder = MenuSeeder(
            store, config, ImageMaterializer(store, config, placeholder)
        )

    async def _run_fatal_phase(self, phase: str, coro: Awaitable[T]) -> T:
        try:
            return await coro
        except Exception as e:
            log_ref = error_logger.log_error(
                error=e,
                category=getattr(e, "category", ErrorCategory.UNEXPECTED_ERROR),
                context={"phase": phase},
            )
            logger.error(
                f"Seeding failed during {phase} [{log_ref}]",
                extra={"phase": phase, "log_ref": log_ref},
            )
            raise SeedAbortedError(phase, e) from e

    async def seed(self, data: CatalogData) -> SeedReport:
        """
        Wipe the target collections and rebuild them from `data`.

        Returns:
            SeedReport for this run

        Raises:
            SeedAbortedError: If the reset, category or customization phase fails
        """
        logger.info("=" * 70)
        logger.info("Starting seed process")
        logger.info("=" * 70)
        report = SeedReport()

        logger.info("\n[STEP 1] Clearing old data...")
        report.deleted = await self._run_fatal_phase("reset", self.resetter.reset_all())
        logger.info("Data cleared successfully")

        logger.info("\n[STEP 2] Seeding categories...")
        report.category_map = await self._run_fatal_phase(
            "categories", self.category_seeder.seed(data["categories"])
        )
        report.categories_created = self.category_seeder.stats["created"]

        logger.info("\n[STEP 3] Seeding customizations...")
        report.customization_map = await self._run_fatal_phase(
            "customizations", self.customization_seeder.seed(data["customizations"])
        )
        report.customizations_created = self.customization_seeder.stats["created"]

        logger.info("\n[STEP 4] Seeding menu items...")
        report.menu_map = await self.menu_seeder.seed(
            data["menu"], report.category_map, report.customization_map
        )
        menu_seeder = self.menu_seeder
        report.menu_items_created = menu_seeder.stats["created"]
        report.links_created = menu_seeder.link_stats["created"]
        report.links_skipped = menu_seeder.link_stats["skipped"]
        report.skipped_items = list(menu_seeder.skipped_items)
        report.failed_items = list(menu_seeder.failed_items)
        report.images_uploaded = menu_seeder.image_stats["uploaded"]
        report.images_placeholder = menu_seeder.image_stats["placeholder"]

        logger.info("\n" + "=" * 70)
        logger.info("Seeding complete.")
        logger.info(
            f"  {report.categories_created} categories, "
            f"{report.customizations_created} customizations, "
            f"{report.menu_items_created} menu items, {report.links_created} links"
        )
        if report.skipped_items or report.failed_items:
            logger.warning(
                f"  Skipped items: {report.skipped_items or '-'}; "
                f"failed items: {report.failed_items or '-'}"
            )
        logger.info("=" * 70)
        return report
