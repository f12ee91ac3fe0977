"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.domain.repository.user_repository import UserRepository


class ClearCartHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str) -> None:
        """Empty the cart.  Clearing an empty cart is a no-op."""
        with self._user_repo.edit(user_id) as user:
            user.cart.clear()
