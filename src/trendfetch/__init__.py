"""
TrendFetch - Marketplace product scraping and import CSV export.

Scrapes a single marketplace product page into a structured record using
schema.org data and DOM heuristics, caches it in memory and flattens it into
a product import CSV with one row per variant.
"""

__version__ = "1.0.0"
__author__ = "TrendFetch"

from .models import ProductRecord, ProductVariants, CategoryConfig
from .services.product_scraper import ProductScraper
from .services.csv_exporter import export_csv

__all__ = [
    "ProductRecord",
    "ProductVariants",
    "CategoryConfig",
    "ProductScraper",
    "export_csv",
]
