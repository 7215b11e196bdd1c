"""
Error kinds raised by the scraping pipeline and their HTTP classification.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .logger import get_logger

logger = get_logger(__name__)


class TrendFetchError(Exception):
    """Base class for all errors raised by TrendFetch."""


class ValidationError(TrendFetchError):
    """Bad or missing input supplied by the client."""


class ScrapingError(TrendFetchError):
    """The product page could not be fetched or a load-bearing field was absent."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details


class ProductDataError(TrendFetchError):
    """The page was fetched but a required product field is missing or malformed."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


@dataclass(slots=True)
class ErrorResponse:
    """HTTP status, user facing message and optional details for a failure."""
    status: int
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"status": "error", "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


def handle_error(error: BaseException) -> ErrorResponse:
    """
    Map an exception to the response the API returns for it.

    Args:
        error: Exception raised while serving a request

    Returns:
        ErrorResponse with the status code and message to send
    """
    if isinstance(error, ScrapingError):
        logger.error("Scraping failed: %s (details=%s)", error, error.details)
        return ErrorResponse(
            status=500,
            message=f"Failed to fetch product data: {error}",
            details=error.details,
        )

    if isinstance(error, ValidationError):
        logger.error("Validation failed: %s", error)
        return ErrorResponse(status=400, message=str(error))

    if isinstance(error, ProductDataError):
        logger.error("Product data error in %s: %s", error.field, error)
        return ErrorResponse(status=422, message=f"{error.field} field error: {error}")

    logger.error("Unexpected error: %s", error, exc_info=error)
    return ErrorResponse(status=500, message="An unexpected error occurred")
