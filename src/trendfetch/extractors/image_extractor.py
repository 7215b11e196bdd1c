"""
Product image extraction.

Images are load-bearing: a product without any image cannot be exported.
"""
from __future__ import annotations

from typing import Any, List

from ..errors import ProductDataError
from .page import ProductPage
from .strategies import run_strategies, unique

MAIN_IMAGE_SELECTOR = "img.detail-section-img"
GALLERY_IMAGE_SELECTOR = "div.gallery-modal-content img"


def _image_urls(value: Any) -> List[str]:
    """Normalize a schema.org image value (URL, ImageObject, or list of either)."""
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, dict):
        return _image_urls(value.get("contentUrl") or value.get("url"))
    if isinstance(value, list):
        urls = []
        for item in value:
            urls.extend(_image_urls(item))
        return urls
    return []


def _from_schema(page: ProductPage) -> List[str]:
    return unique(_image_urls(page.schema.get("image")))


def _from_gallery(page: ProductPage) -> List[str]:
    images = []

    main_image = page.soup.select_one(MAIN_IMAGE_SELECTOR)
    if main_image is not None and main_image.get("src"):
        images.append(main_image["src"])

    for img in page.soup.select(GALLERY_IMAGE_SELECTOR):
        src = img.get("src")
        if src and src not in images:
            images.append(src)

    return images


def extract_images(page: ProductPage) -> List[str]:
    """
    Extract product image URLs in display order.

    Args:
        page: Parsed product page

    Returns:
        Non-empty list of image URLs

    Raises:
        ProductDataError: If no image could be found (field ``images``)
    """
    strategies = [
        ("schema", lambda: _from_schema(page)),
        ("gallery", lambda: _from_gallery(page)),
    ]

    _, images = run_strategies(strategies, label="images")
    if not images:
        raise ProductDataError("Product images not found", "images")
    return images
