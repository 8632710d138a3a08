import logging
from typing import Any, Optional, Sequence

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class StorageNotReady(RuntimeError):
    """Raised when a query runs before the store is opened."""


class Database:
    """
    Single shared handle on the movies store.

    Opened once at startup with ``connect()`` and held until ``disconnect()``.
    Queries are templates with positional ``?`` placeholders; bind values are
    passed alongside, never formatted into the query text.
    """

    def __init__(self, url: str):
        self.url = url
        self.engine: Optional[AsyncEngine] = None

    @property
    def is_ready(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        if self.engine is not None:
            return
        # requests wait for a free connection instead of timing out
        engine = create_async_engine(self.url, pool_timeout=None)
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
        except Exception:
            await engine.dispose()
            raise
        self.engine = engine

    async def disconnect(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise StorageNotReady("Database connection is not open")
        return self.engine

    async def fetch_all(self, query: str, params: Sequence[Any] = ()) -> list[dict]:
        engine = self._require_engine()
        async with engine.connect() as conn:
            result = await conn.exec_driver_sql(query, tuple(params))
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[dict]:
        engine = self._require_engine()
        async with engine.connect() as conn:
            result = await conn.exec_driver_sql(query, tuple(params))
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def count_movies(self) -> int:
        row = await self.fetch_one("SELECT COUNT(*) AS total FROM movies")
        return row["total"] if row else 0


def get_db(request: Request) -> Database:
    return request.app.state.db
