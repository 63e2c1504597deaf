"""
Yummy Catalog Category and Customization Seeders.

Create the parent records menu items point at and build the
name -> document id maps for the current run. Any failure here is
fatal for the run and propagates.
"""

import logging

from database.models import CategoryDoc, CustomizationDoc
from database.seeds.data.common import CategoryData, CustomizationData
from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)


class CategorySeeder(BaseSeeder):
    """Seeds categories in dataset order."""

    async def seed(self, categories: list[CategoryData]) -> dict[str, str]:
        """
        Create one document per source category.

        Duplicate names still create a document; the later id wins in the map.

        Returns:
            Mapping of category name to generated document id
        """
        self.reset_stats()
        category_map: dict[str, str] = {}

        for category in categories:
            doc = await self.create(
                collection_id=self.config.categories_collection_id,
                model_class=CategoryDoc,
                data=dict(category),
                entity_type="Category",
                name=category["name"],
            )
            if category["name"] in category_map:
                logger.warning(
                    f"Duplicate category name '{category['name']}': "
                    f"{category_map[category['name']]} replaced by {doc.id} in the map"
                )
            category_map[category["name"]] = doc.id

        self.log_summary("Categories")
        return category_map


class CustomizationSeeder(BaseSeeder):
    """Seeds customizations in dataset order."""

    async def seed(self, customizations: list[CustomizationData]) -> dict[str, str]:
        """
        Create one document per source customization.

        Returns:
            Mapping of customization name to generated document id
        """
        self.reset_stats()
        customization_map: dict[str, str] = {}

        for customization in customizations:
            doc = await self.create(
                collection_id=self.config.customizations_collection_id,
                model_class=CustomizationDoc,
                data={
                    "name": customization["name"],
                    "price": customization["price"],
                    "type": customization["type"],
                },
                entity_type="Customization",
                name=customization["name"],
            )
            if customization["name"] in customization_map:
                logger.warning(
                    f"Duplicate customization name '{customization['name']}': "
                    f"{customization_map[customization['name']]} replaced by {doc.id} in the map"
                )
            customization_map[customization["name"]] = doc.id

        self.log_summary("Customizations")
        return customization_map
