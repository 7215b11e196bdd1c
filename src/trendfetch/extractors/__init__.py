"""
Field extractors for marketplace product pages.

Each extractor evaluates an ordered list of strategies over a parsed
ProductPage:
- extract_price / extract_images: value or raise
- extract_categories / extract_attributes / extract_variants: value or fallback
"""
from .page import ProductPage
from .price_extractor import extract_price, apply_markup
from .category_extractor import extract_categories
from .attribute_extractor import extract_attributes
from .image_extractor import extract_images
from .variant_extractor import extract_variants, normalize_sizes

__all__ = [
    "ProductPage",
    "extract_price",
    "apply_markup",
    "extract_categories",
    "extract_attributes",
    "extract_images",
    "extract_variants",
    "normalize_sizes",
]
