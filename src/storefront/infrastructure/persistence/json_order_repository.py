"""JSON-file-backed implementation of OrderRepository.

One file per order, filed under a directory per user
(``orders/<user>/<order>.json``), so listing a user's history reads only
that user's files.  An order file is written once, in full, and never
rewritten.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from uuid import uuid4

from storefront.domain.exceptions import StorageUnavailableError
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_files import (
    MALFORMED_RECORD_ERRORS,
    ensure_dir,
    read_json,
    record_dir,
    record_path,
    write_json,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        ensure_dir(self._directory)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for user_dir in self._user_dirs():
            path = record_path(user_dir, order_id)
            if path.exists():
                return self._load(path)
        return None

    def list_for_user(self, user_id: str) -> list[Order]:
        user_dir = self._user_dir(user_id)
        if not user_dir.is_dir():
            return []
        return [self._load(path) for path in sorted(user_dir.glob("*.json"))]

    def add(self, order: Order) -> None:
        user_dir = self._user_dir(order.user_id)
        ensure_dir(user_dir)
        write_json(record_path(user_dir, order.id), self._to_raw(order))

    # --- Layout ---------------------------------------------------------------

    def _user_dir(self, user_id: str) -> Path:
        return record_dir(self._directory, user_id)

    def _user_dirs(self) -> list[Path]:
        try:
            return [p for p in self._directory.iterdir() if p.is_dir()]
        except OSError as exc:
            raise StorageUnavailableError(f"Could not list orders: {exc}") from exc

    def _load(self, path: Path) -> Order:
        raw = read_json(path)
        try:
            return self._to_domain(raw)
        except MALFORMED_RECORD_ERRORS as exc:
            raise StorageUnavailableError(f"Malformed order record {path.name}: {exc!r}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "products": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in order.products
            ],
            "address": order.address,
            "total_amount": str(order.total_amount.amount),
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            products=tuple(
                OrderLine(product_id=line["product_id"], quantity=Quantity(line["quantity"]))
                for line in raw["products"]
            ),
            address=raw["address"],
            total_amount=Money.of(raw["total_amount"]),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
