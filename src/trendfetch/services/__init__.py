"""
Business logic services.

Provides modular components for:
- Category resolution against the import taxonomy
- Product assembly and caching
- CSV export
"""

from .category_mapping import resolve_category_config, CATEGORY_MAPPING, DEFAULT_CATEGORY_CONFIG
from .product_store import ProductStore, product_store
from .product_scraper import ProductScraper, resolve_brand
from .csv_exporter import CSV_COLUMNS, build_handle, build_rows, export_csv

__all__ = [
    'resolve_category_config',
    'CATEGORY_MAPPING',
    'DEFAULT_CATEGORY_CONFIG',
    'ProductStore',
    'product_store',
    'ProductScraper',
    'resolve_brand',
    'CSV_COLUMNS',
    'build_handle',
    'build_rows',
    'export_csv',
]
