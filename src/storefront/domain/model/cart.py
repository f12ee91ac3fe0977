"""Cart aggregate — the mutable list of (product, quantity) lines of one user.

Invariants:
- at most one line per product id
- every line quantity is strictly positive; a line that would drop to
  zero or below is removed instead
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Quantity


def require_product_id(product_id: str) -> str:
    if not isinstance(product_id, str) or not product_id.strip():
        raise ValidationError("Product id is required")
    return product_id.strip()


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)

    def add_item(self, product_id: str, quantity: int) -> CartLine:
        """Add *quantity* units of a product.

        Repeated adds of the same product accumulate on the existing line.
        """
        product_id = require_product_id(product_id)
        added = Quantity(quantity)

        line = self.line_for(product_id)
        if line is not None:
            line.quantity = line.quantity + added
            return line

        line = CartLine(product_id=product_id, quantity=added)
        self.lines.append(line)
        return line

    def remove_item(self, product_id: str, quantity: int | None = None) -> None:
        """Remove a product, entirely or partially.

        With no quantity (or a non-positive one) the whole line goes.
        Otherwise *quantity* units are subtracted and the line is dropped
        once it reaches zero.
        """
        product_id = require_product_id(product_id)
        line = self.line_for(product_id)
        if line is None:
            raise EntityNotFoundError(
                f"Product '{product_id}' not found in the user's cart"
            )

        if quantity is None or quantity <= 0:
            self.lines.remove(line)
            return

        remaining = line.quantity.value - quantity
        if remaining <= 0:
            self.lines.remove(line)
        else:
            line.quantity = Quantity(remaining)

    def clear(self) -> None:
        self.lines.clear()

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines
