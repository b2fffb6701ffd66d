"""In-memory user repository for testing."""

from typing import Optional

from folio.domain.model import User
from folio.domain.model.common import utc_now
from folio.domain.repository import UserRepository
from folio.domain.value import UserId, UserStatus

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by a list of IDs."""
        wanted = set(user_ids)
        return [u for u in self._store.users.values() if u.id in wanted]

    async def upsert_from_remote(self, user: User) -> User:
        """Insert or refresh a user, preserving status."""
        existing = self._store.users.get(user.id)
        if existing is None:
            self._store.users[user.id] = user
            return user

        if existing.status == UserStatus.DELETED:
            return existing

        refreshed = existing.model_copy(
            update={
                "email": user.email,
                "name": user.name,
                "role": user.role,
                "updated_at": utc_now(),
            }
        )
        self._store.users[user.id] = refreshed
        return refreshed

    async def save(self, user: User) -> User:
        """Update a user."""
        self._store.users[user.id] = user
        return user
