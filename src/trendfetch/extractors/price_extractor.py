"""
Price extraction.

Price is load-bearing: if no strategy finds one the whole scrape fails.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Tuple

from ..config import Config
from ..errors import ScrapingError
from ..models import PriceInfo
from ..utils.text_cleaning import format_amount, parse_price_amount
from .page import ProductPage, first_text
from .strategies import run_strategies

PRIMARY_PRICE_SELECTOR = ".prc-dsc, .product-price-container .current-price"
SECONDARY_PRICE_SELECTOR = ".product-price, .discounted-price"
CURRENCY_SUFFIX = "TL"

# (display text, parsed amount)
RawPrice = Tuple[str, Decimal]


def apply_markup(base: Decimal, markup: Optional[str] = None) -> str:
    """
    Derive the sale price from a base price.

    Examples:
        >>> apply_markup(Decimal("100"))
        '115.00'
    """
    factor = Decimal(markup or Config.PRICE_MARKUP)
    return str((base * factor).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _schema_price(page: ProductPage) -> Optional[RawPrice]:
    offers: Any = page.schema.get("offers")
    if isinstance(offers, list):
        offers = offers[0] if offers else None
    if not isinstance(offers, dict):
        return None

    raw = offers.get("price")
    if raw is None or raw == "":
        return None
    amount = parse_price_amount(raw)
    if amount is None:
        return None
    display = raw.strip() if isinstance(raw, str) else format_amount(amount)
    return display, amount


def _dom_price(page: ProductPage, selector: str) -> Optional[RawPrice]:
    text = first_text(page.soup, selector)
    display = text.replace(CURRENCY_SUFFIX, "").strip()
    if not display:
        return None
    amount = parse_price_amount(display)
    if amount is None:
        return None
    return display, amount


def extract_price(page: ProductPage, markup: Optional[str] = None) -> PriceInfo:
    """
    Extract the base price and derive the sale price.

    Strategies: structured-data offer price, primary price selector,
    secondary price selector.

    Args:
        page: Parsed product page
        markup: Price multiplier (defaults to Config.PRICE_MARKUP)

    Returns:
        PriceInfo with the marked-up price and the scraped base price

    Raises:
        ScrapingError: If no strategy yields a price
    """
    strategies = [
        ("schema", lambda: _schema_price(page)),
        ("primary_selector", lambda: _dom_price(page, PRIMARY_PRICE_SELECTOR)),
        ("secondary_selector", lambda: _dom_price(page, SECONDARY_PRICE_SELECTOR)),
    ]

    _, found = run_strategies(strategies, label="price")
    if found is None:
        raise ScrapingError("Price information not found", {"url": page.url})

    display, amount = found
    return PriceInfo(price=apply_markup(amount, markup), base_price=display)
