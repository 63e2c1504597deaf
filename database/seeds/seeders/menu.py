"""
Yummy Catalog Menu Seeder.

Seeds menu items and their customization links:
- Category name resolved to the generated category id (item skipped if unknown)
- Image materialized to a durable URL
- One link document per resolvable customization (unknown ones skipped)

Each item is isolated: an exception while processing one item is logged
and the loop moves on to the next.
"""

import logging

from database.models import MenuCustomizationLinkDoc, MenuItemDoc, build_payload
from database.seeds.data.common import MenuItemData
from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.image import ImageMaterializer, ImageSource
from database.store import UNIQUE_ID, DocumentStore
from shared.config import StoreConfig

logger = logging.getLogger(__name__)


class MenuSeeder(BaseSeeder):
    """Seeds menu items and menu <-> customization links."""

    def __init__(
        self,
        store: DocumentStore,
        config: StoreConfig,
        materializer: ImageMaterializer,
    ):
        super().__init__(store, config)
        self.materializer = materializer
        self.link_stats = {"created": 0, "skipped": 0}
        self.image_stats = {source.value: 0 for source in ImageSource}
        self.skipped_items: list[str] = []
        self.failed_items: list[str] = []

    def reset_stats(self) -> None:
        super().reset_stats()
        self.link_stats = {"created": 0, "skipped": 0}
        self.image_stats = {source.value: 0 for source in ImageSource}
        self.skipped_items = []
        self.failed_items = []

    async def seed(
        self,
        menu: list[MenuItemData],
        category_map: dict[str, str],
        customization_map: dict[str, str],
    ) -> dict[str, str]:
        """
        Create menu item documents and their links.

        Args:
            menu: Source menu items
            category_map: Category name -> document id for this run
            customization_map: Customization name -> document id for this run

        Returns:
            Mapping of menu item name to generated document id
        """
        self.reset_stats()
        menu_map: dict[str, str] = {}

        for item in menu:
            item_name = item.get("name", "<unnamed>")
            try:
                logger.info(f"Processing: {item_name}", extra={"item_name": item_name})
                await self._seed_item(item, category_map, customization_map, menu_map)
            except Exception as e:
                self.log_failed("MenuItem", item_name)
                self.failed_items.append(item_name)
                logger.error(
                    f"Failed to process {item_name}: {e}",
                    exc_info=True,
                    extra={"phase": "menu", "item_name": item_name},
                )
                continue

        self.log_summary("Menu items")
        logger.info(
            f"  Links: {self.link_stats['created']} created, {self.link_stats['skipped']} skipped"
        )
        return menu_map

    async def _seed_item(
        self,
        item: MenuItemData,
        category_map: dict[str, str],
        customization_map: dict[str, str],
        menu_map: dict[str, str],
    ) -> None:
        """Seed one item; its id enters menu_map as soon as the document exists."""
        category_id = category_map.get(item["category_name"])
        if not category_id:
            self.log_skipped(
                "MenuItem", item["name"], f"category not found: {item['category_name']}"
            )
            self.skipped_items.append(item["name"])
            return

        image = await self.materializer.materialize(item["image_url"])
        self.image_stats[image.source.value] += 1

        doc = await self.create(
            collection_id=self.config.menu_collection_id,
            model_class=MenuItemDoc,
            data={
                "name": item["name"],
                "description": item["description"],
                "image_url": image.url,
                "price": item["price"],
                "rating": item["rating"],
                "calories": item["calories"],
                "protein": item["protein"],
                "categories": category_id,
            },
            entity_type="MenuItem",
            name=item["name"],
        )
        menu_map[item["name"]] = doc.id

        for customization_name in item.get("customizations", []):
            customization_id = customization_map.get(customization_name)
            if not customization_id:
                self.link_stats["skipped"] += 1
                logger.warning(
                    f"Customization not found: {customization_name} (item {item['name']})",
                    extra={"item_name": item["name"]},
                )
                continue

            # Links are counted apart from items, so BaseSeeder.create is not used
            payload = build_payload(
                MenuCustomizationLinkDoc,
                {"menu": doc.id, "customizations": customization_id},
            )
            await self.store.create_document(
                self.config.database_id,
                self.config.menu_customizations_collection_id,
                UNIQUE_ID,
                payload,
            )
            self.link_stats["created"] += 1
            logger.info(f"  + Link {item['name']} -> {customization_name}: Created")
