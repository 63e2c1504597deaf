"""Load the source dataset from the bundled module or a JSON file."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from database.seeds.data import menu
from database.seeds.data.common import CUSTOMIZATION_TYPES, CatalogData
from shared.errors import DatasetError

logger = logging.getLogger(__name__)

_catalog_adapter = TypeAdapter(CatalogData)


def load_catalog_data(path: str | Path | None = None) -> CatalogData:
    """
    Return the dataset to seed.

    Args:
        path: JSON file with categories / customizations / menu arrays.
            The bundled dataset is returned when empty.

    Raises:
        DatasetError: If the file cannot be read or has the wrong shape
    """
    if not path:
        logger.info("Using bundled dataset")
        return menu.DATA

    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DatasetError(f"Cannot read dataset file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset file {file_path} is not valid JSON: {e}") from e

    try:
        data = _catalog_adapter.validate_python(raw)
    except ValidationError as e:
        raise DatasetError(
            f"Dataset file {file_path} has an invalid shape: {e.error_count()} error(s)\n{e}"
        ) from e

    for customization in data["customizations"]:
        if customization["type"] not in CUSTOMIZATION_TYPES:
            logger.info(
                f"Customization {customization['name']} uses extension type "
                f"'{customization['type']}'"
            )

    logger.info(
        f"Loaded dataset {file_path}: {len(data['categories'])} categories, "
        f"{len(data['customizations'])} customizations, {len(data['menu'])} menu items"
    )
    return data
