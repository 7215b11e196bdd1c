"""
Size and color variant extraction.
"""
from __future__ import annotations

from typing import Any, Dict, List

from ..models import ProductVariants
from .page import ProductPage, select_texts
from .strategies import run_strategies, unique

SIZE_SELECTORS = [
    ".sp-itm:not(.so)",
    ".variant-list-item:not(.disabled)",
    ".size-variant-wrapper:not(.disabled)",
    ".v2-size-value",
]

COLOR_SELECTORS = [
    ".slc-txt",
    ".color-variant-wrapper",
    ".variant-property-list span",
    '[data-pk="color"] .variant-list-item',
]

SIZE_ORDER: Dict[str, int] = {
    "XXS": 1, "XS": 2, "S": 3, "M": 4, "L": 5, "XL": 6,
    "2XL": 7, "3XL": 8, "4XL": 9, "5XL": 10, "6XL": 11,
}
UNKNOWN_SIZE_RANK = 99


def is_composite_size(size: str) -> bool:
    """
    Detect size-range artifacts such as ``XSSMLXL2XL`` rendered as one token.

    Examples:
        >>> is_composite_size("XSSMLXL")
        True
        >>> is_composite_size("XS")
        False
    """
    return "XS" in size and "S" in size and "M" in size


def normalize_sizes(sizes: List[str]) -> List[str]:
    """
    Drop composite tokens, deduplicate and sort into canonical size order.

    Unrecognized sizes keep their encounter order after the known ones.

    Examples:
        >>> normalize_sizes(["S", "M", "L", "XSSMLXL"])
        ['S', 'M', 'L']
    """
    kept = unique([size for size in sizes if not is_composite_size(size)])
    return sorted(kept, key=lambda size: SIZE_ORDER.get(size, UNKNOWN_SIZE_RANK))


def _schema_variants(page: ProductPage) -> List[Dict[str, Any]]:
    variants = page.schema.get("hasVariant")
    if isinstance(variants, dict):
        variants = [variants]
    if not isinstance(variants, list):
        return []
    return [v for v in variants if isinstance(v, dict)]


def _append_missing(values: List[str], extra: Any) -> None:
    # Shoe sizes often arrive as JSON numbers
    if isinstance(extra, bool) or not isinstance(extra, (str, int, float)):
        return
    value = str(extra).strip()
    if value and value not in values:
        values.append(value)


def extract_sizes(page: ProductPage) -> List[str]:
    """Sizes from the first selector that yields any, in canonical order."""
    strategies = [
        (selector, lambda selector=selector: normalize_sizes(select_texts(page.soup, selector)))
        for selector in SIZE_SELECTORS
    ]
    _, sizes = run_strategies(strategies, label="sizes")
    return sizes or []


def extract_colors(page: ProductPage) -> List[str]:
    """Colors from the first selector that yields any, in page order."""
    strategies = [
        (selector, lambda selector=selector: unique(select_texts(page.soup, selector)))
        for selector in COLOR_SELECTORS
    ]
    _, colors = run_strategies(strategies, label="colors")
    return colors or []


def extract_variants(page: ProductPage) -> ProductVariants:
    """
    Extract size and color variants.

    DOM selectors are tried first; structured-data ``hasVariant`` entries are
    then appended when not already present.

    Args:
        page: Parsed product page

    Returns:
        ProductVariants, possibly with empty lists
    """
    sizes = extract_sizes(page)
    colors = extract_colors(page)

    for variant in _schema_variants(page):
        _append_missing(sizes, variant.get("size"))
        _append_missing(colors, variant.get("color"))

    return ProductVariants(sizes=sizes, colors=colors)
