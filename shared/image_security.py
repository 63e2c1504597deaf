"""
Image asset checks for blob store uploads.

Guards the placeholder upload path against:
- SSRF (fetching from private / metadata addresses)
- Content that is not the image type it claims to be
- Unsafe stored filenames
"""

import logging
import re
from pathlib import Path
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

# Magic number signatures for allowed image types
MAGIC_SIGNATURES = {
    "image/jpeg": [
        b"\xff\xd8\xff\xe0",  # JPEG JFIF
        b"\xff\xd8\xff\xe1",  # JPEG Exif
        b"\xff\xd8\xff\xe2",  # JPEG CIFF
        b"\xff\xd8\xff\xe8",  # JPEG SPIFF
        b"\xff\xd8\xff\xee",  # JPEG Adobe
        b"\xff\xd8\xff\xdb",  # JPEG raw
    ],
    "image/png": [b"\x89\x50\x4e\x47\x0d\x0a\x1a\x0a"],  # PNG
    "image/gif": [
        b"\x47\x49\x46\x38\x37\x61",  # GIF87a
        b"\x47\x49\x46\x38\x39\x61",  # GIF89a
    ],
    "image/webp": [b"\x52\x49\x46\x46"],  # RIFF (WebP starts with RIFF)
}

ALLOWED_MIME_TYPES = set(MAGIC_SIGNATURES)

MIN_IMAGE_SIZE = 100  # bytes (too small = suspicious)

# Private IP ranges for SSRF check
PRIVATE_IP_PREFIXES = [
    "10.",
    "192.168.",
    "127.",
    "0.",
    "169.254.",  # Link-local
]

METADATA_HOSTS = [
    "169.254.169.254",  # AWS/Azure metadata
    "metadata.google.internal",  # GCP metadata
    "metadata.google.com",
]


class ImageSecurityError(Exception):
    """Exception raised for image validation failures."""

    pass


def _is_private_ip(hostname: str) -> bool:
    """Check if hostname is a private/local IP address."""
    if hostname.lower() in ["localhost", "127.0.0.1", "::1", "0.0.0.0"]:
        return True

    for prefix in PRIVATE_IP_PREFIXES:
        if hostname.startswith(prefix):
            return True

    # 172.16.0.0 - 172.31.255.255
    if hostname.startswith("172."):
        parts = hostname.split(".")
        if len(parts) >= 2 and parts[1].isdigit():
            if 16 <= int(parts[1]) <= 31:
                return True

    return False


def validate_url(url: str) -> None:
    """
    Validate that URL is fetchable from a public host (SSRF prevention).

    Args:
        url: URL to validate

    Raises:
        ImageSecurityError: If URL is not http(s) or points at a private or metadata host
    """
    parsed = urlparse(url)

    if parsed.scheme not in ["http", "https"]:
        raise ImageSecurityError(f"Invalid URL scheme: {parsed.scheme}")

    hostname = parsed.hostname
    if not hostname:
        raise ImageSecurityError("Invalid URL: no hostname")

    if _is_private_ip(hostname):
        logger.warning(f"SSRF attempt blocked: {url}")
        raise ImageSecurityError("Private/local addresses not allowed")

    if hostname in METADATA_HOSTS:
        logger.warning(f"Metadata endpoint access blocked: {url}")
        raise ImageSecurityError("Metadata endpoints not allowed")


def detect_mime_from_magic(content: bytes) -> str | None:
    """
    Detect MIME type from file magic numbers.

    Args:
        content: Raw file bytes (at least first 12 bytes needed)

    Returns:
        Detected MIME type or None if not recognized
    """
    if len(content) < 8:
        return None

    for mime_type, signatures in MAGIC_SIGNATURES.items():
        for sig in signatures:
            if content[: len(sig)] == sig:
                # WebP: RIFF container must say WEBP
                if mime_type == "image/webp":
                    if len(content) >= 12 and content[8:12] == b"WEBP":
                        return mime_type
                else:
                    return mime_type

    return None


def validate_magic_number(content: bytes, declared_mime: str | None = None) -> str:
    """
    Validate file content using magic numbers (file signature).

    Unlike user uploads, a placeholder whose bytes disagree with the
    declared content type is rejected rather than re-labelled.

    Args:
        content: Raw file bytes
        declared_mime: MIME type the upload will be stored with

    Returns:
        Detected MIME type

    Raises:
        ImageSecurityError: If the type is unknown, not allowed or mismatched
    """
    if len(content) < MIN_IMAGE_SIZE:
        raise ImageSecurityError(f"File too small: {len(content)} bytes")

    detected_mime = detect_mime_from_magic(content)

    if detected_mime is None:
        raise ImageSecurityError(
            "Could not detect file type. File may not be a valid image."
        )

    if detected_mime not in ALLOWED_MIME_TYPES:
        raise ImageSecurityError(f"File type not allowed: {detected_mime}")

    if declared_mime:
        declared_normalized = declared_mime.replace("jpg", "jpeg")
        if declared_normalized != detected_mime:
            raise ImageSecurityError(
                f"MIME type mismatch: declared={declared_mime}, detected={detected_mime}"
            )

    return detected_mime


def sanitize_filename(original: str) -> str:
    """
    Sanitize a filename for safe storage.

    Args:
        original: Candidate filename

    Returns:
        Filename restricted to word characters, dash and dot
    """
    if not original:
        return "image"

    safe = Path(original).name
    safe = re.sub(r"[^\w\-\.]", "_", safe)
    safe = safe.lstrip(".")

    if not safe:
        return "image"

    # Limit length (preserve extension)
    if len(safe) > 255:
        if "." in safe:
            name_part, ext = safe.rsplit(".", 1)
            max_name_len = 255 - len(ext) - 1
            safe = name_part[:max_name_len] + "." + ext
        else:
            safe = safe[:255]

    return safe


def get_extension_for_mime(mime_type: str) -> str:
    """
    Get file extension for a MIME type.

    Args:
        mime_type: MIME type string

    Returns:
        File extension without dot (e.g., "jpg", "png")
    """
    mime_to_ext = {
        "image/jpeg": "jpg",
        "image/png": "png",
        "image/gif": "gif",
        "image/webp": "webp",
    }
    return mime_to_ext.get(mime_type, "png")
