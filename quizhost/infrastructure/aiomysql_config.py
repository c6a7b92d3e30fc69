import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

import aiofiles
import aiomysql

from quizhost.app.domain.errors import PersistenceError


logger = logging.getLogger('store')


class StoreConnection:
    """
    A single borrowed connection. Every statement goes through here with bound
    parameters and an explicit timeout; driver failures come out as PersistenceError.
    """
    def __init__(self, connection, timeout: float):
        self.connection = connection
        self.timeout = timeout

    async def execute(self, query: str, params: tuple = ()) -> int:
        async with self.connection.cursor() as cursor:
            return await self._run(cursor.execute(query, params), query)

    async def fetch_all(self, query: str, params: tuple = ()) -> list[tuple]:
        async with self.connection.cursor() as cursor:
            await self._run(cursor.execute(query, params), query)
            return list(await self._run(cursor.fetchall(), query))

    async def _run(self, awaitable, query: str):
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("Statement timed out after %ss: %s", self.timeout, query)
            # Result state of the connection is unknown, the pool must not hand it out again
            self.connection.close()
            raise PersistenceError(f"Store call timed out after {self.timeout}s") from e
        except aiomysql.Error as e:
            logger.error("Statement failed: %r", e)
            raise PersistenceError(str(e)) from e


class MySQLPool:
    def __init__(self, host: str, port: int, user: str, password: str, db: str,
                 minsize: int = 1, maxsize: int = 10, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.minsize = minsize
        self.maxsize = maxsize
        self.timeout = timeout
        self.pool = None

    @classmethod
    def from_settings(cls, settings) -> "MySQLPool":
        return cls(
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            user=settings.DB_USER,
            password=settings.DB_PASSWORD,
            db=settings.DB_NAME,
            minsize=settings.DB_POOL_MINSIZE,
            maxsize=settings.DB_POOL_MAXSIZE,
            timeout=settings.DB_QUERY_TIMEOUT,
        )

    async def create_pool(self):
        # Every repository write is one statement, so autocommit keeps them atomic
        # and stops pooled connections from holding stale read snapshots
        self.pool = await aiomysql.create_pool(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            db=self.db,
            minsize=self.minsize,
            maxsize=self.maxsize,
            connect_timeout=self.timeout,
            autocommit=True,
        )

    async def close_pool(self):
        self.pool.close()
        await self.pool.wait_closed()

    async def get_connection(self):
        try:
            return await asyncio.wait_for(self.pool.acquire(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise PersistenceError(f"No store connection available after {self.timeout}s") from e
        except aiomysql.Error as e:
            logger.error("Could not acquire connection: %r", e)
            raise PersistenceError(str(e)) from e

    async def release_connection(self, connection):
        self.pool.release(connection)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[StoreConnection]:
        connection = await self.get_connection()
        try:
            yield StoreConnection(connection, self.timeout)
        finally:
            await self.release_connection(connection)


async def init_schema(store: StoreConnection, path: Optional[str] = None) -> None:
    """
    Creates the quizzes, questions and groups tables if they are missing.

    :param store: Connection to run the DDL on.
    :param path: Path to the SQL file, defaults to the bundled schema.sql.
    """
    if path is None:
        path = str(Path(__file__).with_name('schema.sql'))
    async with aiofiles.open(path, 'r') as f:
        ddl = await f.read()
    for statement in ddl.split(';'):
        if statement.strip():
            await store.execute(statement)
    logger.info("Schema initialized from %s", path)
