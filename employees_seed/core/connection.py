"""Database connection handling."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import psycopg
from psycopg import Connection

from employees_seed.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def ping(conn: Connection) -> None:
    """
    Verify the server answers a trivial round trip.

    Raises:
        DatabaseConnectionError: If the query fails
    """
    try:
        conn.execute("SELECT 1").fetchone()
    except psycopg.Error as e:
        raise DatabaseConnectionError(str(e)) from e


@contextmanager
def open_connection(connection_string: str) -> Iterator[Connection]:
    """
    Open a verified connection and close it when the block exits.

    The connection runs in autocommit mode, so every statement issued
    through it is committed on its own.

    Args:
        connection_string: libpq connection string or URL

    Yields:
        Open psycopg connection

    Raises:
        DatabaseConnectionError: If connecting or the ping fails
    """
    try:
        conn = psycopg.connect(connection_string, autocommit=True)
    except psycopg.Error as e:
        raise DatabaseConnectionError(str(e)) from e

    try:
        ping(conn)
        logger.info("Connected to the database")
        yield conn
    finally:
        conn.close()
        logger.debug("Database connection closed")
