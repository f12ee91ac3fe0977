"""JSON-file-backed implementation of UserRepository.

One file per user, so writes for different users never touch the same
file.  ``edit`` also holds the record's lock file, which keeps
concurrent CLI runs and server processes from overwriting each other.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path

from storefront.domain.exceptions import StorageUnavailableError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.favorites import FavoriteSet
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_files import (
    MALFORMED_RECORD_ERRORS,
    ensure_dir,
    read_json,
    record_lock,
    record_path,
    write_json,
)


class JsonUserRepository(UserRepository):

    def __init__(self, directory: Path) -> None:
        super().__init__()
        self._directory = directory
        ensure_dir(self._directory)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        path = record_path(self._directory, user_id)
        if not path.exists():
            return None
        raw = read_json(path)
        try:
            return self._to_domain(raw)
        except MALFORMED_RECORD_ERRORS as exc:
            raise StorageUnavailableError(f"Malformed user record {path.name}: {exc!r}") from exc

    def save(self, user: User) -> None:
        write_json(record_path(self._directory, user.id), self._to_raw(user))

    def _record_lock(self, user_id: str) -> AbstractContextManager:
        return record_lock(record_path(self._directory, user_id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "cart": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in user.cart.lines
            ],
            "favorites": list(user.favorites),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw.get("name", ""),
            cart=Cart(
                lines=[
                    CartLine(product_id=line["product_id"], quantity=Quantity(line["quantity"]))
                    for line in raw.get("cart", [])
                ]
            ),
            favorites=FavoriteSet(product_ids=list(raw.get("favorites", []))),
        )
