"""
Tests for image asset checks.

Tests cover:
- SSRF (Server-Side Request Forgery) prevention
- Magic number validation
- Filename sanitization
"""

import pytest
from io import BytesIO
from PIL import Image

from shared.image_security import (
    ImageSecurityError,
    validate_url,
    validate_magic_number,
    sanitize_filename,
    detect_mime_from_magic,
    get_extension_for_mime,
)


def encode_image(fmt: str, size=(100, 100), mode="RGB") -> bytes:
    img = Image.new(mode, size, color="red")
    buffer = BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


# =============================================================================
# URL Validation Tests
# =============================================================================


class TestValidateUrl:
    """Tests for validate_url function."""

    def test_placeholder_service_allowed(self):
        """The placeholder service and public CDNs should pass."""
        validate_url("https://via.placeholder.com/300x200.png?text=pizza")
        validate_url("https://static.vecteezy.com/system/resources/previews/1.png")

    def test_localhost_blocked(self):
        """Localhost variants should be blocked."""
        with pytest.raises(ImageSecurityError):
            validate_url("http://localhost/admin")

        with pytest.raises(ImageSecurityError):
            validate_url("http://127.0.0.1/secret")

        with pytest.raises(ImageSecurityError):
            validate_url("http://0.0.0.0/")

    def test_private_ips_blocked(self):
        """Private IP addresses should be blocked."""
        with pytest.raises(ImageSecurityError):
            validate_url("http://192.168.1.1/")

        with pytest.raises(ImageSecurityError):
            validate_url("http://10.0.0.1/internal")

        with pytest.raises(ImageSecurityError):
            validate_url("http://172.16.0.1/")

    def test_public_172_range_allowed(self):
        validate_url("http://172.32.0.1/image.png")

    def test_metadata_blocked(self):
        """Cloud metadata endpoints should be blocked."""
        with pytest.raises(ImageSecurityError):
            validate_url("http://169.254.169.254/latest/meta-data/")

        with pytest.raises(ImageSecurityError):
            validate_url("http://metadata.google.internal/computeMetadata/v1/")

    def test_invalid_scheme_blocked(self):
        """Non-HTTP schemes should be blocked."""
        with pytest.raises(ImageSecurityError):
            validate_url("file:///etc/passwd")

        with pytest.raises(ImageSecurityError):
            validate_url("ftp://server.com/file")

    def test_missing_hostname_blocked(self):
        with pytest.raises(ImageSecurityError):
            validate_url("https:///image.png")


# =============================================================================
# Magic Number Validation Tests
# =============================================================================


class TestValidateMagicNumber:
    """Tests for validate_magic_number function."""

    def test_valid_png(self):
        """Valid PNG should be detected."""
        assert validate_magic_number(encode_image("PNG"), "image/png") == "image/png"

    def test_valid_jpeg(self):
        """Valid JPEG should be detected, with jpg as an alias."""
        content = encode_image("JPEG")

        assert validate_magic_number(content, "image/jpeg") == "image/jpeg"
        assert validate_magic_number(content, "image/jpg") == "image/jpeg"

    def test_declared_type_optional(self):
        assert validate_magic_number(encode_image("GIF")) == "image/gif"

    def test_mismatch_rejected(self):
        """A JPEG served where a PNG was declared should be rejected."""
        with pytest.raises(ImageSecurityError, match="mismatch"):
            validate_magic_number(encode_image("JPEG"), "image/png")

    def test_html_error_page_blocked(self):
        """An HTML error page in place of the image should be blocked."""
        page = b"<!DOCTYPE html><html><body>Service unavailable</body></html>" + b" " * 100

        with pytest.raises(ImageSecurityError):
            validate_magic_number(page, "image/png")

    def test_executable_blocked(self):
        """Executable files should be blocked."""
        elf_header = b"\x7fELF" + b"\x00" * 100

        with pytest.raises(ImageSecurityError):
            validate_magic_number(elf_header, "image/png")

    def test_too_small_file(self):
        """Files that are too small should be blocked."""
        with pytest.raises(ImageSecurityError, match="too small"):
            validate_magic_number(b"\x89PNG\r\n\x1a\n", "image/png")


# =============================================================================
# Filename Sanitization Tests
# =============================================================================


class TestSanitizeFilename:
    """Tests for sanitize_filename function."""

    def test_basic_sanitization(self):
        """Basic filenames should be sanitized."""
        assert sanitize_filename("margherita-1700000000000-1a2b3c4d.png") == (
            "margherita-1700000000000-1a2b3c4d.png"
        )
        assert sanitize_filename("bean burrito.png") == "bean_burrito.png"

    def test_path_components_removed(self):
        """Path components should be removed."""
        assert sanitize_filename("../../../secret.png") == "secret.png"

    def test_special_chars_replaced(self):
        """Special characters should be replaced."""
        result = sanitize_filename("image<script>.png")
        assert "<" not in result
        assert ">" not in result

    def test_empty_returns_default(self):
        """Empty filename should return default."""
        assert sanitize_filename("") == "image"
        assert sanitize_filename("...") == "image"

    def test_long_name_keeps_extension(self):
        result = sanitize_filename("x" * 300 + ".png")

        assert len(result) == 255
        assert result.endswith(".png")


class TestHelperFunctions:
    """Tests for helper functions."""

    def test_detect_mime(self):
        assert detect_mime_from_magic(encode_image("PNG", (50, 50), "RGBA")) == "image/png"
        assert detect_mime_from_magic(encode_image("JPEG", (50, 50))) == "image/jpeg"
        assert detect_mime_from_magic(encode_image("WEBP", (50, 50))) == "image/webp"

    def test_detect_mime_rejects_plain_riff(self):
        """RIFF containers other than WebP are not images."""
        wav = b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 100

        assert detect_mime_from_magic(wav) is None

    def test_detect_mime_short_input(self):
        assert detect_mime_from_magic(b"\x89PN") is None

    def test_get_extension(self):
        """Extension mapping should work."""
        assert get_extension_for_mime("image/jpeg") == "jpg"
        assert get_extension_for_mime("image/png") == "png"
        assert get_extension_for_mime("image/gif") == "gif"
        assert get_extension_for_mime("image/webp") == "webp"
        assert get_extension_for_mime("unknown/type") == "png"  # Default
