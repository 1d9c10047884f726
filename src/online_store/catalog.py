"""Fixed product catalog.

The catalog is built once at startup from :data:`DEFAULT_PRODUCTS` and
is read‑only afterwards.  Lookups are a linear scan comparing ids
case‑insensitively, which is plenty for a handful of products.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from online_store.config import MAX_PRODUCTS
from online_store.errors import CapacityExceeded, ProductNotFound


@dataclass(frozen=True)
class Product:
    """In‑memory representation of a catalog product."""
    id: str
    name: str
    price: Decimal


DEFAULT_PRODUCTS = (
    Product("P001", "Pen", Decimal("10")),
    Product("P002", "Notebook", Decimal("50")),
    Product("P003", "Eraser", Decimal("5")),
    Product("P004", "Ruler", Decimal("20")),
    Product("P005", "Pencil", Decimal("8")),
)


class Catalog:
    """Read‑only collection of products in fixed display order."""

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS, capacity: int = MAX_PRODUCTS) -> None:
        self._products: List[Product] = list(products)
        if len(self._products) > capacity:
            raise CapacityExceeded("Catalog", capacity)

    def lookup(self, product_id: str) -> Product:
        """Return the product whose id matches ``product_id`` ignoring case.

        Raises:
            ProductNotFound: If no catalog entry matches.
        """
        wanted = product_id.strip().casefold()
        for product in self._products:
            if product.id.casefold() == wanted:
                return product
        raise ProductNotFound(product_id)

    def list(self) -> List[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)
