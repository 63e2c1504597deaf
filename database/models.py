"""
Document models - one schema per target collection.

Payloads are validated here before they are sent to the store, so a
shape mismatch surfaces as PayloadValidationError at the boundary
instead of as an opaque store rejection.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shared.errors import PayloadValidationError


class _DocumentModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CategoryDoc(_DocumentModel):
    """Persisted form of a source category."""

    name: str = Field(min_length=1)
    description: str = ""


class CustomizationDoc(_DocumentModel):
    """Persisted form of a source customization (topping, side, size, crust...)."""

    name: str = Field(min_length=1)
    price: float
    type: str = Field(min_length=1)


class MenuItemDoc(_DocumentModel):
    """Menu item with its category rewritten from a name to a document id."""

    name: str = Field(min_length=1)
    description: str = ""
    image_url: str = Field(min_length=1)
    price: float
    rating: float
    calories: int
    protein: int
    categories: str = Field(min_length=1)


class MenuCustomizationLinkDoc(_DocumentModel):
    """One edge of the menu item <-> customization many-to-many join."""

    menu: str = Field(min_length=1)
    customizations: str = Field(min_length=1)


COLLECTION_NAMES: dict[type[BaseModel], str] = {
    CategoryDoc: "categories",
    CustomizationDoc: "customizations",
    MenuItemDoc: "menu",
    MenuCustomizationLinkDoc: "menu_customizations",
}


def build_payload(model_class: type[BaseModel], data: dict[str, Any]) -> dict[str, Any]:
    """
    Validate `data` against a document model and return the wire payload.

    Raises:
        PayloadValidationError: If the data does not match the schema
    """
    try:
        instance = model_class.model_validate(data)
    except ValidationError as e:
        collection = COLLECTION_NAMES.get(model_class, model_class.__name__)
        raise PayloadValidationError(collection, e.errors(include_url=False)) from e
    return instance.model_dump(mode="json")
