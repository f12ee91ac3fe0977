"""Abstract repository for the Order aggregate.

Orders are append-only: there is no update or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return every order placed by *user_id*, in any order."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order."""
