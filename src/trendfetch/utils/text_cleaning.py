"""
Text cleaning and normalization utilities.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

_PRICE_NOISE_RE = re.compile(r"[^\d.,\-]")
_THOUSANDS_DOT_RE = re.compile(r"-?\d{1,3}(?:\.\d{3})+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def turkish_lower(text: str) -> str:
    """
    Lowercase text using Turkish casing rules for dotted and dotless I.

    Examples:
        >>> turkish_lower("KADIN İç Giyim")
        'kadın iç giyim'
    """
    if not text:
        return ""
    return text.replace("I", "ı").replace("İ", "i").lower()


def slugify(text: str) -> str:
    """
    Build a URL handle from free text.

    Lowercases the text, collapses every run of characters outside a-z/0-9
    into one hyphen and strips hyphens from both ends.

    Examples:
        >>> slugify("Basic T-Shirt (Beyaz)")
        'basic-t-shirt-beyaz'
    """
    if not text:
        return ""
    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")


def parse_price_amount(raw: Any) -> Optional[Decimal]:
    """
    Parse a scraped price into a Decimal.

    Accepts JSON numbers as well as display strings such as ``"299,99 TL"``
    or ``"1.299,99"``; the last separator is treated as the decimal mark when
    both ``.`` and ``,`` are present.

    Args:
        raw: Number or price text

    Returns:
        Parsed amount, or None if no number could be read

    Examples:
        >>> parse_price_amount("1.299,99 TL")
        Decimal('1299.99')
        >>> parse_price_amount("TL")
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float, Decimal)):
        try:
            amount = Decimal(str(raw))
        except InvalidOperation:
            return None
        return amount if amount.is_finite() else None

    text = _PRICE_NOISE_RE.sub("", str(raw))
    if not re.search(r"\d", text):
        return None

    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif "," in text:
        text = text.replace(",", ".")
    elif _THOUSANDS_DOT_RE.fullmatch(text):
        text = text.replace(".", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def format_amount(amount: Decimal) -> str:
    """
    Render an amount without a trailing ``.0`` for whole numbers.

    Examples:
        >>> format_amount(Decimal("100.0"))
        '100'
        >>> format_amount(Decimal("89.90"))
        '89.9'
    """
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")
