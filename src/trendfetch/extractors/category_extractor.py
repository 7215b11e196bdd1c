"""
Category breadcrumb extraction.
"""
from __future__ import annotations

import re
from typing import Any, List, Optional

from ..config import Config
from .page import ProductPage, first_text, select_texts
from .strategies import run_strategies

BREADCRUMB_SELECTOR = ".breadcrumb-wrapper span, .product-path span, .breadcrumb li"
BRAND_SELECTOR = ".pr-new-br span, .product-brand-name, .brand-name"
MAIN_CATEGORY_SELECTOR = ".product-category-container span"
SUB_CATEGORY_SELECTOR = ".detail-category-wrapper span, .product-type-wrapper span"
PRODUCT_TYPE_SELECTOR = ".product-type, .type-name"
TITLE_SELECTOR = ".pr-new-br"
HEADING_SELECTOR = "h1.pr-new-br"

BREADCRUMB_SEPARATORS = {">", "/"}
GENDER_RE = re.compile(r"(erkek|kadın|unisex|çocuk)", re.IGNORECASE)
PRODUCT_TYPES = ["Giyim", "Spor", "Ayakkabı", "Aksesuar"]
DEFAULT_CATEGORIES = ["Giyim"]


def _breadcrumb_names(breadcrumb: Any, root_label: str) -> List[str]:
    if not isinstance(breadcrumb, dict):
        return []
    items = breadcrumb.get("itemListElement")
    if not isinstance(items, list):
        return []

    names = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        if not name and isinstance(item.get("item"), dict):
            name = item["item"].get("name")
        if isinstance(name, str) and name.strip() and name.strip() != root_label:
            names.append(name.strip())
    return names


def _from_schema_breadcrumb(page: ProductPage, root_label: str) -> List[str]:
    for obj in page.iter_jsonld_objects():
        if obj.get("@type") == "BreadcrumbList":
            names = _breadcrumb_names(obj, root_label)
        else:
            names = _breadcrumb_names(obj.get("breadcrumb"), root_label)
        if names:
            return names
    return []


def _from_breadcrumb_dom(page: ProductPage, root_label: str) -> List[str]:
    return [
        text for text in select_texts(page.soup, BREADCRUMB_SELECTOR)
        if text not in BREADCRUMB_SEPARATORS and text != root_label
    ]


def _from_detail_composite(page: ProductPage) -> List[str]:
    parts = []

    brand = first_text(page.soup, BRAND_SELECTOR)
    if brand:
        parts.append(brand)

    main_category = first_text(page.soup, MAIN_CATEGORY_SELECTOR)
    if main_category:
        parts.append(main_category)

    for category in select_texts(page.soup, SUB_CATEGORY_SELECTOR):
        if category not in parts:
            parts.append(category)

    return parts


def _from_title_keywords(page: ProductPage) -> List[str]:
    title = first_text(page.soup, TITLE_SELECTOR)
    product_type = first_text(page.soup, PRODUCT_TYPE_SELECTOR)
    match = GENDER_RE.search(title)
    gender: Optional[str] = match.group(0) if match else None

    if not gender and not product_type:
        return []

    parts = []
    if gender:
        parts.append(gender[0].upper() + gender[1:])
    if product_type:
        parts.append(product_type)

    lowered_title = title.lower()
    for p_type in PRODUCT_TYPES:
        if p_type.lower() in lowered_title and p_type not in parts:
            parts.append(p_type)

    return parts


def _from_page_heading(page: ProductPage) -> List[str]:
    heading = first_text(page.soup, HEADING_SELECTOR)
    return [heading] if heading else []


def extract_categories(page: ProductPage, root_label: Optional[str] = None) -> List[str]:
    """
    Extract the product's category breadcrumb.

    Never fails: when no strategy finds anything the default clothing
    category is returned.

    Args:
        page: Parsed product page
        root_label: Breadcrumb root to drop (defaults to Config.MARKETPLACE_NAME)

    Returns:
        Category names, outermost first
    """
    root = root_label or Config.MARKETPLACE_NAME
    strategies = [
        ("schema_breadcrumb", lambda: _from_schema_breadcrumb(page, root)),
        ("breadcrumb_dom", lambda: _from_breadcrumb_dom(page, root)),
        ("detail_composite", lambda: _from_detail_composite(page)),
        ("title_keywords", lambda: _from_title_keywords(page)),
        ("page_heading", lambda: _from_page_heading(page)),
    ]

    _, categories = run_strategies(strategies, label="categories")
    return categories or list(DEFAULT_CATEGORIES)
