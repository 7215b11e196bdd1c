"""
Pytest configuration and fixtures for TrendFetch tests.
"""
import json
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import pytest
import requests

from trendfetch.api import create_app
from trendfetch.extractors import ProductPage
from trendfetch.services.product_scraper import ProductScraper
from trendfetch.services.product_store import ProductStore

PRODUCT_URL = "https://www.trendyol.com/mavi/basic-tisort-p-123456"

PRODUCT_SCHEMA = {
    "@context": "https://schema.org",
    "@type": "Product",
    "name": "Mavi Erkek Basic Tişört",
    "description": "Pamuklu, bisiklet yaka basic tişört.",
    "brand": {"@type": "Brand", "name": "Mavi"},
    "image": {
        "@type": "ImageObject",
        "contentUrl": [
            "https://cdn.example.com/1.jpg",
            "https://cdn.example.com/2.jpg",
            "https://cdn.example.com/3.jpg",
        ],
    },
    "offers": {"@type": "Offer", "price": 100, "priceCurrency": "TRY"},
    "additionalProperty": [
        {"@type": "PropertyValue", "name": "Kumaş", "unitText": "Pamuk"},
        {"@type": "PropertyValue", "name": "Yaka Tipi", "unitText": "Bisiklet Yaka"},
    ],
}

BREADCRUMB_SCHEMA = {
    "@context": "https://schema.org",
    "@type": "BreadcrumbList",
    "itemListElement": [
        {"@type": "ListItem", "position": 1, "name": "Trendyol"},
        {"@type": "ListItem", "position": 2, "name": "Erkek"},
        {"@type": "ListItem", "position": 3, "item": {"name": "Tişört"}},
    ],
}

BODY = """
<h1 class="pr-new-br"><a>Mavi</a> <span>Erkek Basic Tişört</span></h1>
<div class="product-price-container"><span class="prc-dsc">89,99 TL</span></div>
<div class="sp-itm">S</div>
<div class="sp-itm so">XS</div>
<div class="sp-itm">M</div>
<div class="slc-txt">Beyaz</div>
<div class="slc-txt">Siyah</div>
<div class="detail-attr-container">
  <table><tr><th>Desen</th><td>Düz</td></tr></table>
</div>
"""


def make_html(*schemas, body: str = BODY) -> str:
    """Build a product page with the given JSON-LD blocks in order."""
    scripts = "\n".join(
        f'<script type="application/ld+json">{json.dumps(s, ensure_ascii=False)}</script>'
        for s in schemas
    )
    return f"<!DOCTYPE html><html><head><title>Test</title>{scripts}</head><body>{body}</body></html>"


def make_page(body: str = "", *schemas) -> ProductPage:
    """Parse a page with an optional body and JSON-LD blocks."""
    return ProductPage.from_html(make_html(*schemas, body=body))


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str = "", status_code: int = 200, reason: str = "OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    """Records GET calls and answers them with a canned response."""

    def __init__(self, response=None, error: Exception = None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def product_html():
    """Sample product page with schema, breadcrumb and DOM variants."""
    return make_html(PRODUCT_SCHEMA, BREADCRUMB_SCHEMA)


@pytest.fixture
def product_url():
    return PRODUCT_URL


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def session(product_html):
    return FakeSession(FakeResponse(product_html))


@pytest.fixture
def scraper(store, session):
    return ProductScraper(store=store, session=session)


@pytest.fixture
def failing_session():
    return FakeSession(error=requests.ConnectionError("connection refused"))


@pytest.fixture
def app(scraper):
    app = create_app(scraper=scraper)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
