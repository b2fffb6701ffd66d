"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import User
from folio.domain.model.common import utc_now
from folio.domain.repository import UserRepository
from folio.domain.value import UserId, UserStatus
from folio.persistence.mappers import row_to_user, user_to_dict
from folio.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by a list of IDs."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def upsert_from_remote(self, user: User) -> User:
        """Insert or refresh a user in one statement.

        ``ON CONFLICT (id) DO UPDATE`` only touches email, name and role, and
        the WHERE clause skips rows already marked DELETED.
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "email": stmt.excluded.email,
                "name": stmt.excluded.name,
                "role": stmt.excluded.role,
                "updated_at": utc_now(),
            },
            where=users_table.c.status != UserStatus.DELETED.value,
        )
        await self.session.execute(stmt)
        await self.session.flush()

        stored = await self.find_by_id(user.id)
        return stored or user

    async def save(self, user: User) -> User:
        """Update an existing user."""
        values = user_to_dict(user)
        values.pop("id")
        values.pop("created_at")
        stmt = update(users_table).where(users_table.c.id == user.id).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
