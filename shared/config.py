"""
Configuration module - Central access point for environment variables.

CRITICAL: Access ALL environment variables through this module.
NEVER use os.getenv() directly in application code.

Components do not call get_settings() themselves. The entry point builds
StoreConfig / PlaceholderConfig once and passes them down.
"""

__all__ = [
    "Settings",
    "StoreConfig",
    "PlaceholderConfig",
    "get_settings",
]

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(
        default="json",
        description="Log output format: json or text"
    )

    # Appwrite
    APPWRITE_ENDPOINT: str = Field(
        default="https://cloud.appwrite.io/v1",
        description="Appwrite API endpoint including the /v1 suffix"
    )
    APPWRITE_PROJECT_ID: str = Field(default="placeholder")
    APPWRITE_API_KEY: str = Field(
        default="",
        description="Server API key with databases and storage scopes"
    )
    APPWRITE_DATABASE_ID: str = Field(default="68686a16000c2a991e3a")
    APPWRITE_BUCKET_ID: str = Field(default="686994be0017d9644625")
    APPWRITE_CATEGORIES_COLLECTION_ID: str = Field(default="68698e8d0000e06aa573")
    APPWRITE_CUSTOMIZATIONS_COLLECTION_ID: str = Field(default="6869929c00319e0e1e49")
    APPWRITE_MENU_COLLECTION_ID: str = Field(default="68698f700035caccddfb")
    APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID: str = Field(default="686993cc0002f084d004")

    STORE_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Per-request HTTP timeout against the store"
    )
    STORE_LIST_LIMIT: int = Field(
        default=5000,
        ge=1,
        description="Page size requested when listing documents or files"
    )

    # Placeholder images
    PLACEHOLDER_BASE_URL: str = Field(default="https://via.placeholder.com")
    PLACEHOLDER_WIDTH: int = Field(default=300, gt=0)
    PLACEHOLDER_HEIGHT: int = Field(default=200, gt=0)
    PLACEHOLDER_FALLBACK_LABEL: str = Field(default="food")
    PLACEHOLDER_CONTENT_TYPE: str = Field(default="image/png")
    PLACEHOLDER_ESTIMATED_SIZE: int = Field(
        default=10240,
        description="Declared size in bytes for the placeholder upload"
    )

    # Dataset
    SEED_DATA_FILE: str | None = Field(
        default=None,
        description="Optional JSON dataset path; the bundled dataset is used when unset"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
        frozen = True


class StoreConfig(BaseModel):
    """Identifiers of the remote database, bucket and collections."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    project_id: str
    api_key: str = ""
    database_id: str
    bucket_id: str
    categories_collection_id: str
    customizations_collection_id: str
    menu_collection_id: str
    menu_customizations_collection_id: str
    timeout_seconds: float = 10.0
    list_limit: int = 5000

    @classmethod
    def from_settings(cls, settings: Settings) -> "StoreConfig":
        return cls(
            endpoint=settings.APPWRITE_ENDPOINT.rstrip("/"),
            project_id=settings.APPWRITE_PROJECT_ID,
            api_key=settings.APPWRITE_API_KEY,
            database_id=settings.APPWRITE_DATABASE_ID,
            bucket_id=settings.APPWRITE_BUCKET_ID,
            categories_collection_id=settings.APPWRITE_CATEGORIES_COLLECTION_ID,
            customizations_collection_id=settings.APPWRITE_CUSTOMIZATIONS_COLLECTION_ID,
            menu_collection_id=settings.APPWRITE_MENU_COLLECTION_ID,
            menu_customizations_collection_id=settings.APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID,
            timeout_seconds=settings.STORE_TIMEOUT_SECONDS,
            list_limit=settings.STORE_LIST_LIMIT,
        )

    @property
    def collection_ids(self) -> list[str]:
        """Collection ids in reset order: categories, customizations, menu, links."""
        return [
            self.categories_collection_id,
            self.customizations_collection_id,
            self.menu_collection_id,
            self.menu_customizations_collection_id,
        ]


class PlaceholderConfig(BaseModel):
    """Parameters of the synthetic placeholder image."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://via.placeholder.com"
    width: int = 300
    height: int = 200
    fallback_label: str = "food"
    content_type: str = "image/png"
    estimated_size: int = 10240

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlaceholderConfig":
        return cls(
            base_url=settings.PLACEHOLDER_BASE_URL.rstrip("/"),
            width=settings.PLACEHOLDER_WIDTH,
            height=settings.PLACEHOLDER_HEIGHT,
            fallback_label=settings.PLACEHOLDER_FALLBACK_LABEL,
            content_type=settings.PLACEHOLDER_CONTENT_TYPE,
            estimated_size=settings.PLACEHOLDER_ESTIMATED_SIZE,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()
