"""Application service: Add Favorite use case."""

from __future__ import annotations

from storefront.domain.repository.user_repository import UserRepository


class AddFavoriteHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, product_id: str) -> None:
        with self._user_repo.edit(user_id) as user:
            user.favorites.add(product_id)
