"""
Pydantic schemas for API validation and data contracts.
"""

from .requests import (
    ScrapeRequest,
    VariantsSchema,
    ProductSchema,
    ExportRequest,
    CategoryRequest,
)

__all__ = [
    'ScrapeRequest',
    'VariantsSchema',
    'ProductSchema',
    'ExportRequest',
    'CategoryRequest',
]
