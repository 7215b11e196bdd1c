"""
Input validation utilities.
"""
from typing import Optional
from urllib.parse import urlparse

from ..config import Config

PRODUCT_PATH_MARKERS = ("/p-", "-p-")


def is_valid_url(url: str) -> bool:
    """
    Check if a string is a valid HTTP/HTTPS URL.

    Args:
        url: URL string to validate

    Returns:
        True if URL is valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    try:
        result = urlparse(url)
    except ValueError:
        return False

    return all([
        result.scheme in ("http", "https"),
        result.netloc,
    ])


def is_marketplace_product_url(url: str, host: Optional[str] = None) -> bool:
    """
    Check that a URL points at a product page of the marketplace.

    The hostname must equal the marketplace host exactly and the path must
    carry a product id marker (``/p-`` or ``-p-``).

    Args:
        url: URL string to check
        host: Marketplace hostname (defaults to Config.MARKETPLACE_HOST)

    Returns:
        True if the URL looks like a marketplace product page

    Examples:
        >>> is_marketplace_product_url("https://www.trendyol.com/marka/urun-adi-p-123456")
        True
        >>> is_marketplace_product_url("https://example.com/urun-adi-p-123456")
        False
    """
    if not is_valid_url(url):
        return False

    parsed = urlparse(url)
    expected_host = host or Config.MARKETPLACE_HOST
    if parsed.hostname != expected_host:
        return False

    return any(marker in parsed.path for marker in PRODUCT_PATH_MARKERS)


def product_url_error_message(host: Optional[str] = None) -> str:
    """Message shown when a URL is not a marketplace product URL."""
    expected_host = host or Config.MARKETPLACE_HOST
    return (
        f"Enter a valid product URL from {expected_host}. "
        f"Example: https://{expected_host}/brand/product-name-p-123456"
    )
