"""
Map marketplace category breadcrumbs onto the import target's taxonomy.

Product-type keywords are matched first (exact, then substring), gender
keywords are only used as a fallback, and a catch-all clothing entry covers
everything else.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from ..models import CategoryConfig, VariantConfig
from ..utils.text_cleaning import turkish_lower

CLOTHING_ATTRIBUTES = ["Kumaş", "Desen", "Yaka Tipi", "Kol Boyu"]


def _apparel(path: str) -> CategoryConfig:
    return CategoryConfig(
        marketplace_category=path,
        variant_config=VariantConfig(
            size_label="Beden",
            color_label="Renk",
            default_stock=50,
            has_variants=True,
        ),
        attributes=list(CLOTHING_ATTRIBUTES),
        inventory_tracking=True,
    )


def _wallet(attributes: List[str]) -> CategoryConfig:
    return CategoryConfig(
        marketplace_category="Apparel & Accessories > Handbags, Wallets & Cases > Wallets & Money Clips",
        variant_config=VariantConfig(
            color_label="Renk",
            material_label="Materyal",
            default_stock=50,
            has_variants=True,
        ),
        attributes=attributes,
        inventory_tracking=True,
    )


# Product-type keywords, checked in this order
CATEGORY_MAPPING: Dict[str, CategoryConfig] = {
    "tişört": _apparel("Apparel & Accessories > Clothing > Shirts & Tops"),
    "cüzdan": _wallet(["Malzeme", "Boyut", "Bölme Sayısı", "Kart Bölmesi"]),
    "kartlık": _wallet(["Malzeme", "Boyut", "Kart Bölmesi"]),
    "sneaker": CategoryConfig(
        marketplace_category="Apparel & Accessories > Shoes > Athletic Shoes",
        variant_config=VariantConfig(
            size_label="Numara",
            color_label="Renk",
            default_stock=30,
            has_variants=True,
        ),
        attributes=["Taban", "Materyal", "Bağcık", "Kullanım Alanı"],
        inventory_tracking=True,
    ),
}

GENDER_MAPPING: Dict[str, CategoryConfig] = {
    "erkek": _apparel("Apparel & Accessories > Clothing > Men's Clothing"),
    "kadın": _apparel("Apparel & Accessories > Clothing > Women's Clothing"),
}

DEFAULT_CATEGORY_CONFIG = CategoryConfig(
    marketplace_category="Apparel & Accessories > Clothing",
    variant_config=VariantConfig(
        size_label="Beden",
        color_label="Renk",
        default_stock=50,
        has_variants=True,
    ),
    attributes=[],
    inventory_tracking=True,
)


def resolve_category_config(categories: Iterable[str]) -> CategoryConfig:
    """
    Resolve the taxonomy entry for a product's categories.

    Args:
        categories: Raw category strings, outermost first

    Returns:
        The first matching CategoryConfig; never raises

    Examples:
        >>> resolve_category_config(["Erkek Giyim", "Tişört"]).marketplace_category
        'Apparel & Accessories > Clothing > Shirts & Tops'
    """
    normalized = [turkish_lower(c).strip() for c in categories if c]

    for category in normalized:
        if category in CATEGORY_MAPPING:
            return CATEGORY_MAPPING[category]

    for category in normalized:
        for key, config in CATEGORY_MAPPING.items():
            if key in category:
                return config

    for key, config in GENDER_MAPPING.items():
        if any(key in category for category in normalized):
            return config

    return DEFAULT_CATEGORY_CONFIG
