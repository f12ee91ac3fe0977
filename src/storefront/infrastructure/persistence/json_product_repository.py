"""JSON-file-backed, read-only view of the product catalog.

Records are decoded one at a time, so a malformed entry only affects
lookups of that product.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from storefront.domain.exceptions import StorageUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_files import (
    MALFORMED_RECORD_ERRORS,
    read_json,
)

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._load().get(product_id)
        if raw is None:
            return None
        return self._decode(raw)

    def list_all(self) -> list[Product]:
        products: list[Product] = []
        for product_id, raw in self._load().items():
            try:
                products.append(self._decode(raw))
            except StorageUnavailableError as exc:
                logger.warning("catalog.record_skipped", product_id=product_id, reason=str(exc))
        return products

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, dict]:
        """Raw catalog records by id.  Entries without a string id are ignored."""
        if not self._file_path.exists():
            return {}
        items = read_json(self._file_path)
        if not isinstance(items, list):
            raise StorageUnavailableError(f"{self._file_path.name} must hold a list of products")
        return {
            item["id"]: item
            for item in items
            if isinstance(item, dict) and isinstance(item.get("id"), str)
        }

    @staticmethod
    def _decode(raw: dict) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                price=Money.of(raw["price"]),
                image=raw.get("image", ""),
                description=raw.get("description", ""),
                category=raw.get("category", ""),
            )
        except MALFORMED_RECORD_ERRORS as exc:
            raise StorageUnavailableError(
                f"Malformed catalog record '{raw['id']}': {exc!r}"
            ) from exc
