"""
In-memory product cache keyed by source URL.
"""
from __future__ import annotations

import dataclasses
import itertools
import threading
from typing import Dict, Optional

from ..logger import get_logger
from ..models import ProductRecord

logger = get_logger(__name__)


class ProductStore:
    """
    Process-lifetime product cache.

    Every save assigns the next sequential id (starting at 1, never reused)
    and stores the record under its URL, replacing any previous entry for
    that URL. Nothing is ever evicted.
    """

    def __init__(self) -> None:
        self._products: Dict[str, ProductRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, url: str) -> Optional[ProductRecord]:
        with self._lock:
            return self._products.get(url)

    def save(self, product: ProductRecord) -> ProductRecord:
        """
        Store a product and assign it an id.

        Args:
            product: Fully assembled product record

        Returns:
            A copy of the record carrying its assigned id
        """
        with self._lock:
            saved = dataclasses.replace(product, id=next(self._ids))
            self._products[saved.url] = saved
        logger.debug("STORE saved product %d for %s", saved.id, saved.url)
        return saved

    def clear(self) -> None:
        """Drop every cached product. Ids keep increasing."""
        with self._lock:
            self._products.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._products


# Shared store used by the API
product_store = ProductStore()
