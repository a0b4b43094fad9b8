"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db
from settings import DB_PATH


class BaseRepository:
    """Base repository over a shared DuckDB connection.

    Every statement runs on its own cursor, so methods are safe to call
    from `asyncio.to_thread` workers.
    """

    def __init__(self, db_path: str = DB_PATH):
        self._db_path = db_path
        self._db = get_db(db_path)
        logger.debug("{} initialized ({})", self.__class__.__name__, db_path)

    @contextmanager
    def _cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        cur = self._db.cursor()
        try:
            yield cur
        finally:
            cur.close()

    def execute(self, query: str, params: list | None = None) -> None:
        """Execute SQL statement."""
        with self._cursor() as cur:
            if params:
                cur.execute(query, params)
            else:
                cur.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        with self._cursor() as cur:
            return cur.execute(query, params or []).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        with self._cursor() as cur:
            return cur.execute(query, params or []).fetchone()
