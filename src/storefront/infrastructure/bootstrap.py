"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Repositories are built once per process: the user repository carries
the per-user locks, so every request must share the same instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


@dataclass(frozen=True)
class Repositories:
    users: UserRepository
    orders: OrderRepository
    products: ProductRepository


def build_repositories(settings: Settings) -> Repositories:
    return Repositories(
        users=JsonUserRepository(settings.users_dir),
        orders=JsonOrderRepository(settings.orders_dir),
        products=JsonProductRepository(settings.catalog_file),
    )


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def repositories() -> Repositories:
    return build_repositories(settings())


def user_repository() -> UserRepository:
    return repositories().users


def order_repository() -> OrderRepository:
    return repositories().orders


def product_repository() -> ProductRepository:
    return repositories().products
