"""
Product attribute extraction.

Unlike the other extractors every source is consulted; the first source to
report a given attribute name wins and later sources never overwrite it.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from bs4 import Tag

from ..logger import get_logger
from .page import ProductPage, first_text, node_text
from .strategies import STRATEGY_ERRORS

logger = get_logger(__name__)

Pair = Tuple[str, str]

ATTRIBUTE_TABLE_SELECTOR = ".detail-attr-container tr"
GENERIC_ATTRIBUTE_SELECTORS = [
    ".product-feature-list li",
    ".detail-attr-item",
    ".product-properties li",
    ".detail-border-bottom tr",
    ".product-details tr",
]
LABEL_SELECTOR = ".detail-attr-label, .property-label"
VALUE_SELECTOR = ".detail-attr-value, .property-value"

# Canonical attribute name -> labels it may appear under on the page
CANONICAL_ATTRIBUTES: Dict[str, List[str]] = {
    "Materyal": ["Materyal", "Kumaş", "Material"],
    "Parça Sayısı": ["Parça Sayısı", "Adet"],
    "Renk": ["Renk", "Color"],
    "Desen": ["Desen", "Pattern"],
    "Yıkama Talimatı": ["Yıkama Talimatı", "Yıkama"],
    "Menşei": ["Menşei", "Üretim Yeri", "Origin"],
}

GROUP_ITEM_SELECTOR = ".featured-attributes-group .featured-attributes-item"
GROUP_LABEL_SELECTOR = ".featured-attributes-label"
GROUP_VALUE_SELECTOR = ".featured-attributes-value"


def _schema_properties(page: ProductPage) -> List[Pair]:
    pairs = []
    for obj in page.iter_jsonld_objects():
        properties = obj.get("additionalProperty")
        if not isinstance(properties, list):
            continue
        for prop in properties:
            if not isinstance(prop, dict):
                continue
            name = prop.get("name")
            value = prop.get("unitText") or prop.get("value")
            if name and value is not None:
                pairs.append((str(name).strip(), str(value).strip()))
    return pairs


def _attribute_table(page: ProductPage) -> List[Pair]:
    pairs = []
    for row in page.soup.select(ATTRIBUTE_TABLE_SELECTOR):
        pairs.append((first_text(row, "th"), first_text(row, "td")))
    return pairs


def _element_pair(element: Tag) -> Pair:
    """Read a label/value pair from one attribute element."""
    if element.select_one(LABEL_SELECTOR) is not None:
        return first_text(element, LABEL_SELECTOR), first_text(element, VALUE_SELECTOR)

    cells = element.find_all(["th", "td"])
    if cells:
        header = element.find("th")
        data_cells = element.find_all("td")
        label = node_text(header) if header is not None else node_text(cells[0])
        value = node_text(data_cells[-1]) if data_cells else ""
        return label, value

    label, _, value = node_text(element).partition(":")
    return label.strip(), value.strip()


def _generic_lists(page: ProductPage) -> List[Pair]:
    pairs = []
    for selector in GENERIC_ATTRIBUTE_SELECTORS:
        for element in page.soup.select(selector):
            pairs.append(_element_pair(element))
    return pairs


def _alternate_label_value(page: ProductPage, label: str) -> Optional[str]:
    selector = (
        f'[data-attribute="{label}"], [data-property="{label}"], '
        f'.detail-attr-item:-soup-contains("{label}")'
    )
    for element in page.soup.select(selector):
        value = first_text(element, VALUE_SELECTOR)
        if value:
            return value
    return None


def _canonical_attributes(page: ProductPage, found: Dict[str, str]) -> List[Pair]:
    pairs = []
    for name, alternatives in CANONICAL_ATTRIBUTES.items():
        if name in found:
            continue
        for alternative in alternatives:
            value = _alternate_label_value(page, alternative)
            if value:
                pairs.append((name, value))
                break
    return pairs


def _attribute_groups(page: ProductPage) -> List[Pair]:
    pairs = []
    for item in page.soup.select(GROUP_ITEM_SELECTOR):
        pairs.append((first_text(item, GROUP_LABEL_SELECTOR), first_text(item, GROUP_VALUE_SELECTOR)))
    return pairs


def _merge(attributes: Dict[str, str], pairs: Iterable[Pair]) -> None:
    for label, value in pairs:
        if label and value and label not in attributes:
            attributes[label] = value


def extract_attributes(page: ProductPage) -> Dict[str, str]:
    """
    Collect product attributes from structured data and attribute tables.

    Args:
        page: Parsed product page

    Returns:
        Attribute name to value mapping; empty if nothing was found
    """
    attributes: Dict[str, str] = {}

    sources = [
        ("schema", lambda: _schema_properties(page)),
        ("attribute_table", lambda: _attribute_table(page)),
        ("generic_lists", lambda: _generic_lists(page)),
        ("canonical_names", lambda: _canonical_attributes(page, attributes)),
        ("attribute_groups", lambda: _attribute_groups(page)),
    ]

    for name, source in sources:
        try:
            _merge(attributes, source())
        except STRATEGY_ERRORS as e:
            logger.warning("ATTRIBUTES source %s failed: %s", name, e)

    logger.debug("ATTRIBUTES found %d: %s", len(attributes), list(attributes))
    return attributes
