"""
Product assembly: fetch a marketplace product page and build a ProductRecord.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

import requests

from ..config import Config
from ..errors import ProductDataError, ScrapingError, ValidationError
from ..extractors import (
    ProductPage,
    extract_attributes,
    extract_categories,
    extract_images,
    extract_price,
    extract_variants,
)
from ..logger import get_logger
from ..models import ProductRecord
from ..utils.validators import is_marketplace_product_url, product_url_error_message
from .product_store import ProductStore, product_store

logger = get_logger(__name__)


def resolve_brand(schema: Dict[str, Any], title: str) -> str:
    """
    Pick the vendor name for a product.

    Order: structured-data brand name, structured-data manufacturer, first
    word of the title.
    """
    brand = schema.get("brand")
    if isinstance(brand, dict):
        brand = brand.get("name")
    if isinstance(brand, str) and brand.strip():
        return brand.strip()

    manufacturer = schema.get("manufacturer")
    if isinstance(manufacturer, dict):
        manufacturer = manufacturer.get("name")
    if isinstance(manufacturer, str) and manufacturer.strip():
        return manufacturer.strip()

    words = title.split()
    return words[0] if words else ""


class ProductScraper:
    """
    Scrape a single marketplace product page into a cached ProductRecord.

    The flow for ``scrape`` is strictly sequential: validate the URL, return
    the cached record on a hit, otherwise fetch, parse, assemble and save.
    A failure at any step raises before anything is cached.
    """

    def __init__(
        self,
        *,
        store: Optional[ProductStore] = None,
        session: Optional[requests.Session] = None,
        timeout_s: Optional[float] = None,
        user_agent: Optional[str] = None,
        price_markup: Optional[str] = None,
        marketplace_host: Optional[str] = None,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            store: Product cache (defaults to the shared store)
            session: HTTP session used for page fetches
            timeout_s: Fetch timeout in seconds; None waits indefinitely
            user_agent: User-Agent header sent to the marketplace
            price_markup: Multiplier applied to the scraped base price
            marketplace_host: Hostname product URLs must target
        """
        self.store = store if store is not None else product_store
        self.session = session or requests.Session()
        self.timeout_s = timeout_s if timeout_s is not None else Config.FETCH_TIMEOUT_S
        self.user_agent = user_agent or Config.USER_AGENT
        self.price_markup = price_markup or Config.PRICE_MARKUP
        self.marketplace_host = marketplace_host or Config.MARKETPLACE_HOST

    def validate_url(self, url: str) -> str:
        """Return the trimmed URL or raise ValidationError if it is not a product URL."""
        url = (url or "").strip() if isinstance(url, str) else ""
        if not is_marketplace_product_url(url, self.marketplace_host):
            raise ValidationError(product_url_error_message(self.marketplace_host))
        return url

    def scrape(self, url: str) -> ProductRecord:
        """
        Return the product at ``url``, scraping it on a cache miss.

        Args:
            url: Marketplace product page URL

        Returns:
            The cached or newly saved ProductRecord (with id)

        Raises:
            ValidationError: URL is not a marketplace product URL
            ScrapingError: The page could not be fetched or has no price
            ProductDataError: A required field is missing or malformed
        """
        product, _ = self.scrape_with_status(url)
        return product

    def scrape_with_status(self, url: str) -> Tuple[ProductRecord, bool]:
        """Like ``scrape`` but also reports whether the record came from the cache."""
        url = self.validate_url(url)

        existing = self.store.get(url)
        if existing is not None:
            logger.info("Product served from cache: id=%s url=%s", existing.id, url)
            return existing, True

        html = self.fetch_html(url)
        product = self.build_product(html, url)

        saved = self.store.save(product)
        logger.info("Product saved: id=%s url=%s", saved.id, url)
        return saved, False

    def fetch_html(self, url: str) -> str:
        """
        Download a product page.

        Raises:
            ScrapingError: On transport failure or a non-success status
        """
        logger.info("Fetching product page: %s", url)
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise ScrapingError("Product page could not be loaded", {"reason": str(e)}) from e

        logger.debug("FETCH Response: status=%d, length=%d", response.status_code, len(response.text))

        if not response.ok:
            raise ScrapingError(
                "Product page could not be loaded",
                {"status": response.status_code, "statusText": response.reason},
            )

        return response.text

    def _parse_schema(self, page: ProductPage) -> Dict[str, Any]:
        raw = page.first_jsonld_text()
        if not raw:
            raise ProductDataError("Product schema not found", "schema")

        try:
            schema = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Schema parse failed: %s", e)
            raise ProductDataError("Product schema is invalid", "schema") from e

        if not isinstance(schema, dict) or not schema.get("@type") or not schema.get("name"):
            raise ProductDataError("Product schema is invalid", "schema")

        return schema

    def build_product(self, html: str, url: str) -> ProductRecord:
        """
        Assemble a ProductRecord from a fetched page.

        Args:
            html: Page HTML
            url: Source URL stored on the record

        Returns:
            ProductRecord without an id

        Raises:
            ScrapingError: No price could be found
            ProductDataError: Schema, basic info or images are missing
        """
        page = ProductPage.from_html(html, url=url)
        schema = self._parse_schema(page)

        title = str(schema.get("name") or "").strip()
        description = str(schema.get("description") or "").strip()
        price = extract_price(page, self.price_markup)

        if not title or not description or not price.price:
            raise ProductDataError("Basic product information is missing", "basicInfo")

        categories = extract_categories(page)
        attributes = extract_attributes(page)
        images = extract_images(page)
        variants = extract_variants(page)

        logger.debug(
            "ASSEMBLE %s: %d categories, %d attributes, %d images, %d sizes, %d colors",
            url, len(categories), len(attributes), len(images),
            len(variants.sizes), len(variants.colors),
        )

        return ProductRecord(
            url=url,
            title=title,
            description=description,
            price=price.price,
            base_price=price.base_price,
            images=images,
            variants=variants,
            attributes=attributes,
            categories=categories,
            tags=list(categories),
            brand=resolve_brand(schema, title),
        )
