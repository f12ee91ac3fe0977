"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    jwt_secret: str = "dev-secret-change"
    jwt_algorithm: str = "HS256"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def users_dir(self) -> Path:
        return self.data_dir / "users"

    @property
    def orders_dir(self) -> Path:
        return self.data_dir / "orders"

    @property
    def catalog_file(self) -> Path:
        return self.data_dir / "products.json"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            jwt_secret=os.getenv("STOREFRONT_JWT_SECRET", "dev-secret-change"),
            host=os.getenv("STOREFRONT_HOST", "127.0.0.1"),
            port=int(os.getenv("STOREFRONT_PORT", "8000")),
        )
