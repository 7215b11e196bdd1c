"""
Parsed product page shared by all field extractors.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

from ..logger import get_logger

logger = get_logger(__name__)

JSONLD_SELECTOR = 'script[type="application/ld+json"]'


def script_text(script: Tag) -> str:
    return (script.string or script.get_text() or "").strip()


def node_text(element: Tag) -> str:
    """Visible text of an element with whitespace collapsed."""
    return element.get_text(" ", strip=True)


def first_text(soup: BeautifulSoup | Tag, selector: str) -> str:
    """Text of the first element matching a selector, or an empty string."""
    element = soup.select_one(selector)
    return node_text(element) if element is not None else ""


def select_texts(soup: BeautifulSoup | Tag, selector: str) -> List[str]:
    """Non-empty texts of every element matching a selector, in document order."""
    texts = []
    for element in soup.select(selector):
        text = node_text(element)
        if text:
            texts.append(text)
    return texts


@dataclass
class ProductPage:
    """
    A fetched product page, parsed once and queried by every extractor.

    Attributes:
        html: Raw page HTML
        soup: Parsed DOM tree
        jsonld_blocks: Every JSON-LD script that parsed as JSON, in page order
        url: Source URL, if known
    """

    html: str
    soup: BeautifulSoup
    jsonld_blocks: List[Any] = field(default_factory=list)
    url: Optional[str] = None

    @classmethod
    def from_html(cls, html: str, url: Optional[str] = None) -> "ProductPage":
        soup = BeautifulSoup(html, "html.parser")
        blocks = []
        for script in soup.select(JSONLD_SELECTOR):
            raw = script_text(script)
            if not raw:
                continue
            try:
                blocks.append(json.loads(raw))
            except json.JSONDecodeError as e:
                logger.debug("JSON-LD block skipped, parse failed: %s", e)
        return cls(html=html, soup=soup, jsonld_blocks=blocks, url=url)

    def first_jsonld_text(self) -> Optional[str]:
        """Raw text of the first JSON-LD script on the page."""
        script = self.soup.select_one(JSONLD_SELECTOR)
        if script is None:
            return None
        return script_text(script) or None

    @cached_property
    def schema(self) -> Dict[str, Any]:
        """
        The primary structured-data object: the first JSON-LD script.

        Returns an empty dict when the first script is missing, unparseable or
        not a JSON object.
        """
        raw = self.first_jsonld_text()
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def iter_jsonld_objects(self) -> Iterator[Dict[str, Any]]:
        """Recursively iterate through every JSON-LD object, including @graph members."""
        for block in self.jsonld_blocks:
            yield from _iterate_jsonld(block)


def _iterate_jsonld(data: Any) -> Iterator[Dict[str, Any]]:
    if isinstance(data, dict):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                yield from _iterate_jsonld(item)
    elif isinstance(data, list):
        for item in data:
            yield from _iterate_jsonld(item)
