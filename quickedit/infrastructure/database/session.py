"""Async engine and the per-request session every quick edit runs in.

An edit is flushed inside the request's session; the commit happens only
when the endpoint returns without error, so a failed edit leaves no trace.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from quickedit.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def _get_async_url(url: str) -> str:
    """Swap a plain database URL for its async driver variant."""
    for prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return async_prefix + url[len(prefix):]
    return url


def build_engine(url: str) -> AsyncEngine:
    """Create the async engine for ``url``.

    SQL echo is left to the ``LOG_LEVEL_SQL`` category. Server databases get
    ``pool_pre_ping`` so a dropped connection does not fail the next edit.
    """
    async_url = _get_async_url(url)
    options = {} if async_url.startswith("sqlite") else {"pool_pre_ping": True}
    return create_async_engine(async_url, **options)


engine = build_engine(get_settings().database_url)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: commit when the edit succeeded, roll back otherwise."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
