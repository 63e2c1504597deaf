"""
Yummy Catalog Seeders Module.

Reusable seeding logic separated from data definitions.
"""

from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.catalog import CatalogSeeder, SeedReport
from database.seeds.seeders.category import CategorySeeder, CustomizationSeeder
from database.seeds.seeders.image import ImageMaterializer, ImageSource, MaterializedImage
from database.seeds.seeders.menu import MenuSeeder
from database.seeds.seeders.reset import CollectionResetter

__all__ = [
    "BaseSeeder",
    "CatalogSeeder",
    "SeedReport",
    "CategorySeeder",
    "CustomizationSeeder",
    "CollectionResetter",
    "ImageMaterializer",
    "ImageSource",
    "MaterializedImage",
    "MenuSeeder",
]
