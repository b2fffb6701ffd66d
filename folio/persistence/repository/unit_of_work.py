"""PostgreSQL unit of work."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Atomic blocks as savepoints of the request transaction.

    The outer request transaction still commits at the end of the request;
    a failed block leaves nothing behind for it to commit.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
