"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from folio.config import DatabaseSettings

ASYNC_DRIVER = "postgresql+asyncpg"


def async_database_url(url: str) -> str:
    """Point a PostgreSQL URL at the asyncpg driver.

    Hosting platforms hand out ``postgres://`` or ``postgresql://`` URLs;
    SQLAlchemy's async engine needs the driver spelled out.

    Examples:
        >>> async_database_url("postgres://u:p@db:5432/folio")
        'postgresql+asyncpg://u:p@db:5432/folio'
    """
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    if scheme in ("postgres", "postgresql", "postgresql+psycopg2"):
        return f"{ASYNC_DRIVER}://{rest}"
    return url


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine.

    Args:
        database: Connection settings
        echo: Log SQL statements

    Returns:
        Engine with a pre-pinged connection pool
    """
    return create_async_engine(
        async_database_url(database.url),
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for request-scoped sessions.

    Objects stay readable after commit and flushing is explicit, since
    repositories work through Core statements.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
