"""
Publication Assistant Backend - Database Session Management
============================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   One engine (connection pool) per process; one AsyncSession per
       request, handed to route handlers through FastAPI's Depends().
Who:   Routes receive sessions via `get_db_session`; Alembic and tests use
       `Base.metadata`.

Transaction Ownership:
    Repositories never commit. Services call `session.commit()` explicitly
    after staging their mutations. The dependency below only rolls back
    uncommitted work on error and always closes the session, so a request
    that fails half-way leaves the store untouched.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from pubassist.config import settings


def _engine_options() -> Dict[str, Any]:
    """
    Build engine keyword arguments for the configured database.

    SQLite (tests, local runs) shares one in-process connection through
    StaticPool, so the in-memory database survives across sessions. Server
    databases get a sized, pre-pinged pool.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if settings.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
        options["poolclass"] = StaticPool
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
        options["pool_pre_ping"] = settings.db_pool_pre_ping
        options["pool_recycle"] = 3600
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: services map entities to DTOs after commit, which
# must not trigger lazy refreshes outside the async context
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every entity registers with this metadata, which Alembic reads for
    migrations and tests use to create the schema.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (services stage and commit work)
        3. On error: rolls back whatever was not committed
        4. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/Journals")
        async def get_all(db: AsyncSession = Depends(get_db_session)):
            return await journal_service.get_all(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """Create all tables from ORM metadata (used when DB_CREATE_TABLES=true)."""
    # Import models so they are registered on Base.metadata
    from pubassist import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
