"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import CartLineDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class RemoveFromCartHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(
        self,
        user_id: str,
        product_id: str,
        quantity: int | None = None,
    ) -> list[CartLineDTO]:
        """Remove a product from the cart, wholly or by *quantity* units.

        Args:
            user_id: Owner of the cart.
            product_id: Product to remove.
            quantity: Units to take away.  None or a non-positive value
                removes the whole line.
        """
        with self._user_repo.edit(user_id) as user:
            user.cart.remove_item(product_id, quantity)

        return CatalogJoin(self._product_repo).cart(user.cart)
