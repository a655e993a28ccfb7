"""Database engine and schema lifecycle.

The URL comes from settings: DATABASE_URL if set, otherwise a SQLite file in
DATA_DIR. SQLite connections run in WAL mode so a status write never blocks
a concurrent application lookup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings, load_settings

logger = logging.getLogger(__name__)

SQLITE_FILENAME = "certification.db"

SQLITE_PRAGMAS = (
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "busy_timeout=5000",
)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_db_url(settings: Settings | None = None) -> str:
    settings = settings or load_settings()
    if settings.database_url:
        return settings.database_url

    data_dir = Path(settings.data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite+aiosqlite:///{data_dir / SQLITE_FILENAME}"


def _apply_sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    for pragma in SQLITE_PRAGMAS:
        cursor.execute(f"PRAGMA {pragma}")
    cursor.close()


def _create_engine() -> AsyncEngine:
    url = get_db_url()
    engine = create_async_engine(url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _apply_sqlite_pragmas)
    return engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the shared engine, created on first use."""
    global _engine, _session_factory
    if _session_factory is None:
        if _engine is None:
            _engine = _create_engine()
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _session_factory


async def init_db():
    """Create the certification tables if they don't exist."""
    from .sqlmodels import Base

    get_session_factory()
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Certification database ready at %s", _engine.url.render_as_string(hide_password=True))


async def close_db():
    """Dispose the shared engine; the next session request creates a fresh one."""
    global _engine, _session_factory
    engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()
