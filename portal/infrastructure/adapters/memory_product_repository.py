"""
MemoryProductRepository - Implementation in-memory du repository produits.
"""

from dataclasses import replace
from itertools import count
from threading import Lock
from typing import List, Optional

from portal.domain.entities.product import Product
from portal.domain.exceptions import ProductNotFoundError
from portal.domain.ports.product_repository import ProductRepository


class MemoryProductRepository(ProductRepository):
    """Store de produits en memoire, thread-safe."""

    def __init__(self):
        self._products: dict[int, Product] = {}
        self._ids = count(1)
        self._lock = Lock()

    def add(self, product: Product) -> Product:
        with self._lock:
            product.id = next(self._ids)
            self._products[product.id] = replace(product)
            return product

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            return replace(self._get(product_id))

    def list(self, skip: int = 0, take: Optional[int] = None) -> List[Product]:
        with self._lock:
            ordered = [self._products[k] for k in sorted(self._products)]
            end = None if take is None else skip + take
            return [replace(p) for p in ordered[skip:end]]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def update(self, product: Product) -> Product:
        with self._lock:
            self._get(product.id)
            self._products[product.id] = replace(product)
            return product

    def delete(self, product_id: int) -> None:
        with self._lock:
            self._get(product_id)
            del self._products[product_id]

    def clear(self) -> None:
        """Vide le repository (pour tests)."""
        with self._lock:
            self._products.clear()

    def _get(self, product_id: Optional[int]) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
