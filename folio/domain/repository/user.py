"""User repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.user import User
from folio.domain.value import UserId


class UserRepository(ABC):
    """Repository for local User records."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find all users whose id is in the given list.

        Args:
            user_ids: Identifiers to look up

        Returns:
            Matching users in no particular order
        """
        pass

    @abstractmethod
    async def upsert_from_remote(self, user: User) -> User:
        """Insert a user or refresh email/name/role of an existing one.

        Must be a single atomic statement. Status and deactivated_at of an
        existing row are never overwritten, and a DELETED row is left
        untouched entirely.

        Args:
            user: Candidate record built from the identity provider

        Returns:
            The stored user after the upsert
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
