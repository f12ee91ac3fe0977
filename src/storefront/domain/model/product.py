"""Product record as served by the catalog.

The catalog is owned elsewhere; the storefront only reads it.  Cart,
favorites and orders hold a product id, never a copy of these fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Money
    image: str = ""
    description: str = ""
    category: str = ""
