"""
Pydantic schemas for API request validation.

Provides strict input validation at API boundaries while the pipeline itself
works on the dataclass-based models.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import ProductRecord, ProductVariants


class ScrapeRequest(BaseModel):
    """Request schema for the scrape endpoint."""
    url: str = Field(..., description="Marketplace product page URL, checked by the scraper")


class VariantsSchema(BaseModel):
    """Size and color variants of a product."""
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)


class ProductSchema(BaseModel):
    """Product payload as returned by the scrape endpoint."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    url: str = Field(default="", description="Source product page URL")
    title: str = Field(..., min_length=1, description="Product name")
    description: str = Field(default="", description="Product description")
    price: str = Field(..., description="Sale price")
    base_price: str = Field(default="", alias="basePrice", description="Scraped base price")
    images: List[str] = Field(default_factory=list, description="Image URLs in display order")
    variants: VariantsSchema = Field(default_factory=VariantsSchema)
    attributes: Dict[str, str] = Field(default_factory=dict)
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    brand: Optional[str] = Field(default=None, description="Vendor name")

    @field_validator('price', 'base_price', mode='before')
    @classmethod
    def coerce_price(cls, v):
        """Accept numeric prices from clients that send numbers."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('attributes', mode='before')
    @classmethod
    def coerce_attribute_values(cls, v):
        if isinstance(v, dict):
            return {str(key): "" if value is None else str(value) for key, value in v.items()}
        return v

    def to_record(self) -> ProductRecord:
        """Convert to the internal ProductRecord."""
        return ProductRecord(
            id=self.id,
            url=self.url,
            title=self.title,
            description=self.description,
            price=self.price,
            base_price=self.base_price,
            images=list(self.images),
            variants=ProductVariants(
                sizes=list(self.variants.sizes),
                colors=list(self.variants.colors),
            ),
            attributes=dict(self.attributes),
            categories=list(self.categories),
            tags=list(self.tags),
            brand=self.brand or "",
        )


class ExportRequest(BaseModel):
    """Request schema for the CSV export endpoint."""
    product: ProductSchema


class CategoryRequest(BaseModel):
    """Request schema for the category resolution endpoint."""
    categories: List[str] = Field(..., description="Category names, outermost first")
