"""Schema inspection queries."""

import logging

import psycopg
from psycopg import Connection, sql

from employees_seed.core.models import ColumnInfo
from employees_seed.exceptions import QueryError

logger = logging.getLogger(__name__)


class SchemaInspector:
    """Answer catalog questions about a table."""

    def __init__(self, conn: Connection):
        self.conn = conn

    def table_exists(self, table_name: str) -> bool:
        """
        Check whether table_name resolves to a relation.

        The name is quoted before to_regclass() resolves it on the
        search_path, so case is kept and it matches the quoted identifier
        that create_table and the seeder use.

        Raises:
            QueryError: On any database error
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute("SELECT to_regclass(quote_ident(%s))", (table_name,))
                row = cur.fetchone()
        except psycopg.Error as e:
            raise QueryError(table_name, str(e)) from e

        exists = row is not None and row[0] is not None
        logger.debug(f"Table {table_name} exists: {exists}")
        return exists

    def get_columns(self, table_name: str) -> list[ColumnInfo]:
        """Get all columns for a table, in ordinal order."""
        try:
            with self.conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT column_name, data_type, is_nullable, column_default
                    FROM information_schema.columns
                    WHERE table_schema = current_schema()
                      AND table_name = %s
                    ORDER BY ordinal_position
                    """,
                    (table_name,),
                )
                rows = cur.fetchall()
        except psycopg.Error as e:
            raise QueryError(table_name, str(e)) from e

        return [
            ColumnInfo(
                name=row[0],
                pg_type=row[1],
                is_nullable=row[2] == "YES",
                default_value=row[3],
            )
            for row in rows
        ]

    def count_rows(self, table_name: str) -> int:
        """Count rows currently in table_name."""
        query = sql.SQL("SELECT count(*) FROM {}").format(sql.Identifier(table_name))
        try:
            with self.conn.cursor() as cur:
                cur.execute(query)
                row = cur.fetchone()
        except psycopg.Error as e:
            raise QueryError(table_name, str(e)) from e
        return row[0]
