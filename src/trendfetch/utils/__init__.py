"""
Utility modules for TrendFetch.
"""
from .validators import is_valid_url, is_marketplace_product_url, product_url_error_message
from .text_cleaning import (
    turkish_lower,
    slugify,
    parse_price_amount,
    format_amount,
)

__all__ = [
    "is_valid_url",
    "is_marketplace_product_url",
    "product_url_error_message",
    "turkish_lower",
    "slugify",
    "parse_price_amount",
    "format_amount",
]
