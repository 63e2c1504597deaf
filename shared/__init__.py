"""
Yummy Catalog - Shared module.

This module contains configuration, logging and error handling
used across the seeder.
"""

from shared.config import PlaceholderConfig, Settings, StoreConfig, get_settings
from shared.image_security import ImageSecurityError
from shared.logging_config import configure_logging
from shared.errors import (
    CatalogSeedError,
    DatasetError,
    ErrorCategory,
    ErrorLogger,
    PayloadValidationError,
    SeedAbortedError,
    StoreError,
    get_error_logger,
    map_status_to_category,
)

__all__ = [
    # Core utilities
    "Settings",
    "StoreConfig",
    "PlaceholderConfig",
    "get_settings",
    "configure_logging",
    # Image checks
    "ImageSecurityError",
    # Error handling
    "ErrorCategory",
    "ErrorLogger",
    "get_error_logger",
    "map_status_to_category",
    "CatalogSeedError",
    "StoreError",
    "PayloadValidationError",
    "DatasetError",
    "SeedAbortedError",
]
