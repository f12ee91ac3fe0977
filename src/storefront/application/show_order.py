"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_ledger import OrderLedger


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._ledger = OrderLedger(order_repo)
        self._product_repo = product_repo

    def handle(self, order_id: str, user_id: str | None = None) -> OrderDTO:
        """Look up one order.

        When *user_id* is given, another user's order is reported as not
        found rather than disclosed.
        """
        order = self._ledger.get_order(order_id)
        if user_id is not None and order.user_id != user_id:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return CatalogJoin(self._product_repo).order(order)
