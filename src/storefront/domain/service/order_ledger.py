"""Domain service: Order Ledger.

Owns the creation of immutable orders and the queries over a user's
order history.  Validation runs before anything is written, so a
rejected order leaves no trace in storage.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class OrderLedger:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def create_order(
        self,
        user_id: str,
        lines: list[OrderLine],
        address: str,
        total_amount: Money,
    ) -> Order:
        """Validate and persist a new order with status ``Payment Done``.

        Payment itself happens elsewhere; the ledger only records the
        outcome it is given.
        """
        try:
            Order.check(lines, address, total_amount)
        except ValidationError as exc:
            logger.warning("order.rejected", user_id=user_id, reason=str(exc))
            raise

        order = Order.create(
            order_id=self._order_repo.next_id(),
            user_id=user_id,
            products=lines,
            address=address,
            total_amount=total_amount,
        )
        self._order_repo.add(order)

        logger.info(
            "order.committed",
            user_id=user_id,
            order_id=order.id,
            line_count=len(order.products),
            total_amount=str(order.total_amount.amount),
        )
        return order

    def list_orders(self, user_id: str) -> list[Order]:
        """Return the user's orders, most recent first."""
        orders = self._order_repo.list_for_user(user_id)
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def get_order(self, order_id: str) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order
