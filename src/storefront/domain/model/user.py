"""User aggregate — owns one cart and one favorites set.

The identity itself (credentials, tokens) lives with the identity
provider; this record only exists so carts and favorites have an owner.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.favorites import FavoriteSet


@dataclass
class User:
    id: str
    name: str = ""
    cart: Cart = field(default_factory=Cart)
    favorites: FavoriteSet = field(default_factory=FavoriteSet)

    @staticmethod
    def register(user_id: str, name: str = "") -> User:
        if not user_id or not user_id.strip():
            raise ValidationError("User id is required")
        return User(id=user_id.strip(), name=name.strip())
