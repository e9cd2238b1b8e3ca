"""CREATE TABLE for the employees layout."""

import logging

import psycopg
from psycopg import Connection, sql

from employees_seed.core.models import EMPLOYEE_COLUMNS
from employees_seed.exceptions import SchemaError

logger = logging.getLogger(__name__)


def build_create_table(table_name: str) -> sql.Composed:
    """Compose the CREATE TABLE statement for table_name."""
    columns = sql.SQL(",\n    ").join(sql.SQL(col.to_ddl()) for col in EMPLOYEE_COLUMNS)
    return sql.SQL("CREATE TABLE {} (\n    {}\n)").format(
        sql.Identifier(table_name), columns
    )


class SchemaProvisioner:
    """Create the employees table."""

    def __init__(self, conn: Connection):
        self.conn = conn

    def create_table(self, table_name: str) -> None:
        """
        Create table_name with the fixed employee columns.

        No IF NOT EXISTS: callers check existence first, and a table created
        in between surfaces as SchemaError.

        Raises:
            SchemaError: On any database error
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(build_create_table(table_name))
        except psycopg.Error as e:
            raise SchemaError(table_name, str(e)) from e
        logger.info(f"Created table {table_name}")
