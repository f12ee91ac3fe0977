"""Application service: Show Favorites use case (query)."""

from __future__ import annotations

from storefront.application.catalog_join import CatalogJoin
from storefront.application.dto import FavoriteDTO
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ShowFavoritesHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> list[FavoriteDTO]:
        user = self._user_repo.require(user_id)
        return CatalogJoin(self._product_repo).favorites(user.favorites)
