import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from moviedb.database import Database, StorageNotReady
from moviedb.schemas import QueryStatus

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Outcome of one query: the response envelope, or why there is none."""

    status: QueryStatus
    data: dict = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (QueryStatus.OK, QueryStatus.EMPTY)


class CRUDBase:
    def __init__(self, table: str, envelope_key: str):
        self.table = table
        self.envelope_key = envelope_key

    def select_where(self, column: Optional[str] = None) -> str:
        query = f"SELECT * FROM {self.table}"
        if column:
            query += f" WHERE {column} = ?"
        return query

    # ---------------- FETCH ALL ----------------
    async def fetch_all(self, db: Database, query: str, params: Sequence[Any] = ()) -> QueryResult:
        try:
            rows = await db.fetch_all(query, params)
        except StorageNotReady as e:
            logger.error("Query on %s before the database was opened: %s", self.table, e)
            return QueryResult(status=QueryStatus.NOT_READY, error=str(e))
        except SQLAlchemyError as e:
            logger.exception("Query on %s failed", self.table)
            return QueryResult(status=QueryStatus.ERROR, error=str(getattr(e, "orig", None) or e))

        status = QueryStatus.OK if rows else QueryStatus.EMPTY
        return QueryResult(status=status, data={self.envelope_key: rows})
