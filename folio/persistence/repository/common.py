"""Shared helpers for PostgreSQL repositories."""

import logfire
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from folio.domain.error import ConflictError


async def execute_guarded(session: AsyncSession, stmt: Executable, conflict: str) -> None:
    """Execute a write inside a savepoint, translating unique violations.

    The savepoint keeps the surrounding request transaction usable after a
    lost race, so callers can retry.

    Args:
        session: Request session
        stmt: Insert or update statement
        conflict: Message for the ConflictError

    Raises:
        ConflictError: If the statement violates a constraint
    """
    try:
        async with session.begin_nested():
            await session.execute(stmt)
    except IntegrityError as e:
        logfire.warn("Write rejected by constraint", conflict=conflict, error=str(e.orig))
        raise ConflictError(conflict) from e
