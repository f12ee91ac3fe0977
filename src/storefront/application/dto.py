"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP surfaces and the application
layer without exposing domain internals.  Every read of a cart,
favorites list or order has exactly these shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one line of a submitted order (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: live catalog data for one product."""

    id: str
    name: str
    price: Decimal
    image: str
    description: str
    category: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a cart line joined with the catalog.

    ``product`` (and therefore ``subtotal``) is None when the catalog no
    longer knows the product.
    """

    product_id: str
    quantity: int
    product: ProductDTO | None
    subtotal: Decimal | None


@dataclass(frozen=True)
class FavoriteDTO:
    product_id: str
    product: ProductDTO | None


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    quantity: int
    product: ProductDTO | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    products: list[OrderLineDTO]
    address: str
    total_amount: Decimal
    status: str
    created_at: datetime


@dataclass(frozen=True)
class CheckoutResult:
    """Output of a checkout.

    The order exists whenever a CheckoutResult is returned.  If emptying
    the cart afterwards failed, ``cart_cleared`` is False and
    ``cleanup_error`` says why; the order is not affected.
    """

    order: OrderDTO
    cart_cleared: bool
    cleanup_error: str | None = None
