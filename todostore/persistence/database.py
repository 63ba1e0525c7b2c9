"""Async SQLite database wrapper."""

import logging
from pathlib import Path

import aiosqlite

from todostore.errors import SchemaVersionError, StoreNotOpenError
from todostore.persistence.models import SCHEMA, SCHEMA_VERSION

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class Database:
    """Async SQLite database connection manager."""

    def __init__(self, path: Path | str) -> None:
        self._path = path
        self._connection: aiosqlite.Connection | None = None

    @property
    def path(self) -> Path | str:
        return self._path

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the active database connection."""
        if self._connection is None:
            raise StoreNotOpenError("Database not connected")
        return self._connection

    async def connect(self) -> None:
        """Open the database connection and initialize schema."""
        if self._connection is not None:
            return
        in_memory = str(self._path) == MEMORY
        if not in_memory:
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
        self._connection = await aiosqlite.connect(self._path)
        self._connection.row_factory = aiosqlite.Row
        try:
            if not in_memory:
                await self._connection.execute("PRAGMA journal_mode=WAL")
            await self._init_schema()
        except BaseException:
            await self._connection.close()
            self._connection = None
            raise
        logger.info("Database connected: %s", self._path)

    async def disconnect(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            logger.info("Database disconnected")

    async def schema_version(self) -> int:
        """Read the schema version stamped into the database file."""
        row = await self.fetchone("PRAGMA user_version")
        return int(row[0]) if row else 0

    async def _init_schema(self) -> None:
        """Create the schema on a new database file."""
        version = await self.schema_version()
        if version > SCHEMA_VERSION:
            raise SchemaVersionError(version, SCHEMA_VERSION)
        if version == SCHEMA_VERSION:
            logger.debug("Database schema at version %d", version)
            return

        for statement in SCHEMA:
            await self.connection.execute(statement)
        # PRAGMA does not accept bound parameters
        await self.connection.execute(f"PRAGMA user_version = {SCHEMA_VERSION:d}")
        await self.connection.commit()
        logger.debug("Database schema initialized (version %d)", SCHEMA_VERSION)

    async def execute(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Cursor:
        """Execute a SQL statement."""
        if parameters is None:
            return await self.connection.execute(sql)
        return await self.connection.execute(sql, parameters)

    async def fetchone(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Row | None:
        """Execute a query and fetch one row."""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> list[aiosqlite.Row]:
        """Execute a query and fetch all rows."""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.connection.commit()
