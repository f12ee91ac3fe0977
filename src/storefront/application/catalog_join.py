"""Read-through join between stored product ids and the live catalog.

Nothing joined here is ever written back.  A product the catalog cannot
return becomes ``product=None`` on its own line; the rest of the list is
unaffected.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import (
    CartLineDTO,
    FavoriteDTO,
    OrderDTO,
    OrderLineDTO,
    ProductDTO,
)
from storefront.domain.exceptions import StorageUnavailableError
from storefront.domain.model.cart import Cart
from storefront.domain.model.favorites import FavoriteSet
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CatalogJoin:

    def __init__(
        self,
        product_repo: ProductRepository,
        known: dict[str, Product] | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cache: dict[str, Product | None] = dict(known or {})

    def product(self, product_id: str) -> ProductDTO | None:
        if product_id not in self._cache:
            self._cache[product_id] = self._lookup(product_id)
        product = self._cache[product_id]
        return None if product is None else self._to_dto(product)

    def cart(self, cart: Cart) -> list[CartLineDTO]:
        result: list[CartLineDTO] = []
        for line in cart.lines:
            product = self.product(line.product_id)
            result.append(
                CartLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    product=product,
                    subtotal=None if product is None else product.price * line.quantity.value,
                )
            )
        return result

    def favorites(self, favorites: FavoriteSet) -> list[FavoriteDTO]:
        return [
            FavoriteDTO(product_id=product_id, product=self.product(product_id))
            for product_id in favorites
        ]

    def order(self, order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            products=[
                OrderLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    product=self.product(line.product_id),
                )
                for line in order.products
            ],
            address=order.address,
            total_amount=order.total_amount.amount,
            status=order.status.value,
            created_at=order.created_at,
        )

    # --- Internal helpers -----------------------------------------------------

    def _lookup(self, product_id: str) -> Product | None:
        try:
            return self._product_repo.get_by_id(product_id)
        except StorageUnavailableError as exc:
            logger.warning(
                "catalog.lookup_failed", product_id=product_id, reason=str(exc)
            )
            return None

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            image=product.image,
            description=product.description,
            category=product.category,
        )
