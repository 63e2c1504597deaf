"""
Yummy Catalog Seed Data - Common Types.

TypedDict shapes of the source dataset. Records reference each other by
name (natural key); ids only exist once documents are created.
"""

# typing_extensions.TypedDict so pydantic can validate these on every 3.11+ interpreter
from typing_extensions import TypedDict


class CategoryData(TypedDict):
    """Menu category, unique by name."""
    name: str
    description: str


class CustomizationData(TypedDict):
    """Add-on customization, unique by name."""
    name: str
    price: float
    type: str  # "topping" | "side" | "size" | "crust" | any extension


class MenuItemData(TypedDict):
    """Menu item referencing its category and customizations by name."""
    name: str
    description: str
    image_url: str
    price: float
    rating: float
    calories: int
    protein: int
    category_name: str
    customizations: list[str]


class CatalogData(TypedDict):
    """A complete source dataset."""
    categories: list[CategoryData]
    customizations: list[CustomizationData]
    menu: list[MenuItemData]


CUSTOMIZATION_TYPES = ("topping", "side", "size", "crust")
