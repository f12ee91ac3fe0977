"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import CartLineDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class AddToCartHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int = 1) -> list[CartLineDTO]:
        """Add units of a product to the user's cart and return the cart.

        Adding a product that is already in the cart increases its
        quantity; it never replaces it.
        """
        with self._user_repo.edit(user_id) as user:
            user.cart.add_item(product_id, quantity)

        return CatalogJoin(self._product_repo).cart(user.cart)
