"""
Unified Error Handling for the catalog seeder.

Provides the error categories, the exception hierarchy raised at the
store and payload boundaries, and centralized error logging with
structured context.

Usage:
    from shared.errors import ErrorCategory, get_error_logger

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.EXTERNAL_API_ERROR,
        context={"operation": "create_document"}
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any


logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    DATA ERRORS (fix the dataset or the collection schema):
    - VALIDATION_ERROR: Payload or dataset shape mismatch
    - NOT_FOUND_ERROR: Collection, bucket or document does not exist

    SYSTEM ERRORS:
    - EXTERNAL_API_ERROR: Store / blob store failures
    - CONFIGURATION_ERROR: Missing or invalid configuration
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND_ERROR = "not_found_error"
    PERMISSION_ERROR = "permission_error"

    EXTERNAL_API_ERROR = "external_api_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


# HTTP status code to ErrorCategory mapping
STATUS_TO_CATEGORY: dict[int, ErrorCategory] = {
    400: ErrorCategory.VALIDATION_ERROR,
    401: ErrorCategory.PERMISSION_ERROR,
    403: ErrorCategory.PERMISSION_ERROR,
    404: ErrorCategory.NOT_FOUND_ERROR,
    409: ErrorCategory.VALIDATION_ERROR,
    422: ErrorCategory.VALIDATION_ERROR,
    500: ErrorCategory.EXTERNAL_API_ERROR,
    502: ErrorCategory.EXTERNAL_API_ERROR,
    503: ErrorCategory.EXTERNAL_API_ERROR,
    504: ErrorCategory.EXTERNAL_API_ERROR,
}


def map_status_to_category(status_code: int | None) -> ErrorCategory:
    """Map HTTP status code to ErrorCategory.

    Transport failures (no status code) count as external API errors.
    """
    if status_code is None:
        return ErrorCategory.EXTERNAL_API_ERROR
    return STATUS_TO_CATEGORY.get(status_code, ErrorCategory.UNEXPECTED_ERROR)


# =============================================================================
# Exceptions
# =============================================================================


class CatalogSeedError(Exception):
    """Base class for all catalog seeder errors."""

    category: ErrorCategory = ErrorCategory.UNEXPECTED_ERROR


class StoreError(CatalogSeedError):
    """A call to the remote document store or blob store failed."""

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.status_code = status_code
        self.category = map_status_to_category(status_code)
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{operation} failed{status}: {message}")


class PayloadValidationError(CatalogSeedError):
    """A document payload does not match its collection schema."""

    category = ErrorCategory.VALIDATION_ERROR

    def __init__(self, collection: str, errors: list[dict[str, Any]]):
        self.collection = collection
        self.errors = errors
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ())) or "<root>"
            for err in errors
        )
        super().__init__(f"Invalid {collection} payload: {fields}")


class DatasetError(CatalogSeedError):
    """The source dataset could not be read or has the wrong shape."""

    category = ErrorCategory.VALIDATION_ERROR


class SeedAbortedError(CatalogSeedError):
    """A run-level failure stopped the seed; the cause is chained."""

    def __init__(self, phase: str, cause: BaseException):
        self.phase = phase
        self.cause = cause
        self.category = getattr(cause, "category", ErrorCategory.UNEXPECTED_ERROR)
        super().__init__(f"Seeding aborted during {phase}: {cause}")


# =============================================================================
# Error logger
# =============================================================================


class ErrorLogger:
    """Centralized error logging with structured context."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: BaseException,
        category: ErrorCategory,
        *,
        context: dict[str, Any] | None = None,
        exc_info: bool = True,
    ) -> str:
        """Log error with full structured context.

        Args:
            error: The exception that occurred
            category: Error category for classification
            context: Additional context data (operation, item name, phase...)
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        log_ref = self._generate_log_ref()

        log_data = {
            "log_ref": log_ref,
            "error_category": category.value,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "context": context or {},
        }

        if category in [
            ErrorCategory.EXTERNAL_API_ERROR,
            ErrorCategory.UNEXPECTED_ERROR,
        ]:
            self.logger.error(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )
        else:
            self.logger.warning(
                f"[{log_ref}] {category.value}: {error}",
                extra=log_data,
                exc_info=exc_info,
            )

        return log_ref


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger
