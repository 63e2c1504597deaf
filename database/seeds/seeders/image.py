"""
Yummy Catalog Image Materializer.

Turns a source image reference into a URL the app can load. A placeholder
image is uploaded to the blob store; if anything in that path fails the
placeholder URL itself is returned, so materialize() never raises.
"""

import logging
import time
import uuid
from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from database.store import UNIQUE_ID, DocumentStore, FileDescriptor
from shared.config import PlaceholderConfig, StoreConfig
from shared.errors import ErrorCategory, get_error_logger
from shared.image_security import get_extension_for_mime, sanitize_filename

logger = logging.getLogger(__name__)
error_logger = get_error_logger()

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


class ImageSource(str, Enum):
    """Which path produced a materialized image URL."""
    UPLOADED = "uploaded"
    PLACEHOLDER = "placeholder"


class MaterializedImage(BaseModel):
    """A usable image URL plus how it was obtained."""

    model_config = ConfigDict(frozen=True)

    url: str
    source: ImageSource
    file_id: str | None = None

    @property
    def uploaded(self) -> bool:
        return self.source is ImageSource.UPLOADED


class ImageMaterializer:
    """Uploads one placeholder asset per call; there is no caching."""

    def __init__(
        self,
        store: DocumentStore,
        config: StoreConfig,
        placeholder: PlaceholderConfig,
    ):
        self.store = store
        self.config = config
        self.placeholder = placeholder

    def derive_label(self, source_ref: str) -> str:
        """Filename component of the reference without its extension."""
        last_segment = (source_ref or "").split("/")[-1]
        label = last_segment.split(".")[0]
        return label or self.placeholder.fallback_label

    def placeholder_url(self, label: str) -> str:
        """Deterministic placeholder URL for a label."""
        ext = get_extension_for_mime(self.placeholder.content_type)
        text = quote(label, safe=_URI_COMPONENT_SAFE)
        return (
            f"{self.placeholder.base_url}/"
            f"{self.placeholder.width}x{self.placeholder.height}.{ext}?text={text}"
        )

    def _upload_name(self, label: str) -> str:
        ext = get_extension_for_mime(self.placeholder.content_type)
        stamp = time.time_ns() // 1_000_000
        return sanitize_filename(f"{label}-{stamp}-{uuid.uuid4().hex[:8]}.{ext}")

    async def materialize(self, source_ref: str) -> MaterializedImage:
        """
        Produce a durable image URL for `source_ref`.

        Returns:
            MaterializedImage with source UPLOADED and the blob view URL, or
            source PLACEHOLDER and the placeholder URL when the upload failed.
        """
        label = self.derive_label(source_ref)
        placeholder_url = self.placeholder_url(label)

        try:
            logger.info(f"Using placeholder image: {placeholder_url}")
            descriptor = FileDescriptor(
                uri=placeholder_url,
                name=self._upload_name(label),
                content_type=self.placeholder.content_type,
                size=self.placeholder.estimated_size,
            )
            uploaded = await self.store.create_file(self.config.bucket_id, UNIQUE_ID, descriptor)
            file_url = self.store.get_file_view_url(self.config.bucket_id, uploaded.id)
            logger.info(f"Placeholder uploaded successfully: {uploaded.id}")
            return MaterializedImage(
                url=str(file_url),
                source=ImageSource.UPLOADED,
                file_id=uploaded.id,
            )
        except Exception as e:
            error_logger.log_error(
                error=e,
                category=ErrorCategory.EXTERNAL_API_ERROR,
                context={"operation": "materialize_image", "source_ref": source_ref},
                exc_info=False,
            )
            logger.warning(f"Placeholder upload failed, using direct URL: {placeholder_url}")
            return MaterializedImage(url=placeholder_url, source=ImageSource.PLACEHOLDER)
