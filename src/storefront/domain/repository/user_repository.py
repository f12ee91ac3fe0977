"""Abstract repository for the User aggregate (cart + favorites owner)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.user import User
from storefront.domain.repository.keyed_lock import KeyedLock


class UserRepository(ABC):

    def __init__(self) -> None:
        self._locks = KeyedLock()

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""

    def _record_lock(self, user_id: str) -> AbstractContextManager:
        """Lock shared with other processes using the same store.

        In-process stores have nothing to share, so the default is a no-op.
        """
        return nullcontext()

    def require(self, user_id: str) -> User:
        user = self.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user

    @contextmanager
    def edit(self, user_id: str) -> Iterator[User]:
        """Load, mutate and save one user as a single atomic step.

        The user's lock is held from the read to the write, so two
        concurrent edits of the same user are applied one after the
        other, in this process and in any other process that uses the
        same store.  If the block raises, nothing is saved.
        """
        with self._locks.hold(user_id), self._record_lock(user_id):
            user = self.require(user_id)
            yield user
            self.save(user)
