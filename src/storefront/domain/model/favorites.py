"""Favorites — a deduplicated set of product ids, kept in insertion order."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.cart import require_product_id


@dataclass
class FavoriteSet:
    product_ids: list[str] = field(default_factory=list)

    def add(self, product_id: str) -> None:
        """Add a product; already-favorited products are left alone."""
        product_id = require_product_id(product_id)
        if product_id not in self.product_ids:
            self.product_ids.append(product_id)

    def remove(self, product_id: str) -> None:
        """Remove a product; removing an absent product is a no-op."""
        product_id = require_product_id(product_id)
        if product_id in self.product_ids:
            self.product_ids.remove(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self.product_ids

    def __iter__(self):
        return iter(list(self.product_ids))

    def __len__(self) -> int:
        return len(self.product_ids)
