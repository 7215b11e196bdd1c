"""
Data models for TrendFetch product extraction.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass(slots=True)
class ProductVariants:
    """
    Selectable variant values of a product.

    Attributes:
        sizes: Size labels, deduplicated and in canonical size order
        colors: Color labels, deduplicated in encounter order
    """

    sizes: List[str] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"sizes": list(self.sizes), "colors": list(self.colors)}


@dataclass(slots=True)
class PriceInfo:
    """Scraped base price and the derived sale price, both as display strings."""

    price: str
    base_price: str


@dataclass(slots=True)
class ProductRecord:
    """
    Canonical product extracted from a marketplace product page.

    Attributes:
        url: Source product page URL (cache key)
        title: Product name from structured data
        description: Product description from structured data
        price: Sale price, base price with markup applied
        base_price: Price as scraped from the page
        images: Image URLs in display order
        variants: Size and color variants
        attributes: Attribute name to value mapping
        categories: Category breadcrumb, outermost first
        tags: Same values as categories
        brand: Vendor name
        id: Sequential identifier assigned by the product store
    """

    url: str
    title: str
    description: str
    price: str
    base_price: str
    images: List[str] = field(default_factory=list)
    variants: ProductVariants = field(default_factory=ProductVariants)
    attributes: Dict[str, str] = field(default_factory=dict)
    categories: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    brand: str = ""
    id: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON shape used by the API."""
        data: Dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "price": self.price,
            "basePrice": self.base_price,
            "images": list(self.images),
            "variants": self.variants.to_dict(),
            "attributes": dict(self.attributes),
            "categories": list(self.categories),
            "tags": list(self.tags),
            "brand": self.brand,
        }
        if self.id is not None:
            data["id"] = self.id
        return data


@dataclass(slots=True)
class VariantConfig:
    """Variant option labels and stock defaults for a marketplace category."""

    default_stock: int
    has_variants: bool
    size_label: Optional[str] = None
    color_label: Optional[str] = None
    material_label: Optional[str] = None

    def to_dict(self) -> dict:
        data: Dict[str, Any] = {
            "defaultStock": self.default_stock,
            "hasVariants": self.has_variants,
        }
        if self.size_label is not None:
            data["sizeLabel"] = self.size_label
        if self.color_label is not None:
            data["colorLabel"] = self.color_label
        if self.material_label is not None:
            data["materialLabel"] = self.material_label
        return data


@dataclass(slots=True)
class CategoryConfig:
    """
    Import settings for one entry of the marketplace taxonomy.

    Attributes:
        marketplace_category: Full taxonomy path on the import target
        variant_config: Variant labels and stock defaults
        attributes: Attribute names worth surfacing for this category
        inventory_tracking: Whether the import target should track stock
    """

    marketplace_category: str
    variant_config: VariantConfig
    attributes: List[str] = field(default_factory=list)
    inventory_tracking: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "marketplaceCategory": self.marketplace_category,
            "variantConfig": self.variant_config.to_dict(),
            "attributes": list(self.attributes),
            "inventoryTracking": self.inventory_tracking,
        }
