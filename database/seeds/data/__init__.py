"""
Yummy Catalog Seed Data Module.

This module contains the seed data definitions separated from seeding logic.
"""

from database.seeds.data.common import (
    CatalogData,
    CategoryData,
    CustomizationData,
    MenuItemData,
)
from database.seeds.data import menu
from database.seeds.data.loader import load_catalog_data

__all__ = [
    # Type definitions
    "CatalogData",
    "CategoryData",
    "CustomizationData",
    "MenuItemData",
    # Bundled dataset
    "menu",
    "load_catalog_data",
]
