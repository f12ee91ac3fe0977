"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import OrderDTO
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_ledger import OrderLedger


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._ledger = OrderLedger(order_repo)
        self._product_repo = product_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        """Return the user's orders, newest first.  No orders is not an error."""
        join = CatalogJoin(self._product_repo)
        return [join.order(order) for order in self._ledger.list_orders(user_id)]
