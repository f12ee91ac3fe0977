"""Order aggregate — an immutable record of one successful checkout.

Orders are created once, by the checkout, and never change afterwards.
Lines hold a product reference and a quantity only; names, images and
prices are joined from the catalog when an order is read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PAYMENT_DONE = "Payment Done"
    PAYMENT_FAILED = "Payment Failed"


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    quantity: Quantity

    @staticmethod
    def of(product_id: str, quantity: int) -> OrderLine:
        if not isinstance(product_id, str) or not product_id.strip():
            raise ValidationError("Every order line needs a product id")
        return OrderLine(product_id=product_id.strip(), quantity=Quantity(quantity))


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders; it enforces the payload rules.
    The constructor itself does not validate, so the repository can
    reconstitute stored orders as they are.
    """

    id: str
    user_id: str
    products: tuple[OrderLine, ...]
    address: str
    total_amount: Money
    status: OrderStatus = OrderStatus.PAYMENT_DONE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        user_id: str,
        products: list[OrderLine],
        address: str,
        total_amount: Money,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        Order.check(products, address, total_amount)
        return Order(
            id=order_id,
            user_id=user_id,
            products=tuple(products),
            address=address.strip(),
            total_amount=total_amount,
        )

    @staticmethod
    def check(products: list[OrderLine], address: str, total_amount: Money) -> None:
        """Raise ValidationError if the order payload is unacceptable."""
        if not products:
            raise ValidationError("Products array is required and cannot be empty")
        if not address or not address.strip():
            raise ValidationError("Address is required")
        if not total_amount.is_positive:
            raise ValidationError("Valid total amount is required")
