"""Application service: Register User use case.

Creates the empty cart/favorites owner for an identity the identity
provider already knows about.  No credentials are stored here.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, user_id: str, name: str = "") -> User:
        user = User.register(user_id, name)
        if self._user_repo.get_by_id(user.id) is not None:
            raise ValidationError(f"User '{user.id}' already exists")
        self._user_repo.save(user)
        return user
