"""Insert generated employees one row at a time."""

from __future__ import annotations

import logging

import psycopg
from psycopg import Connection, sql

from employees_seed.core.generator import EmployeeGenerator
from employees_seed.core.models import INSERT_COLUMNS, SEED_COUNT, Employee
from employees_seed.exceptions import InsertError

logger = logging.getLogger(__name__)


class EmployeeSeeder:
    """
    Execute seeding using single-row INSERT statements.

    Uses RETURNING to capture the emp_id assigned by the SERIAL default.
    There is no surrounding transaction: on an autocommit connection each
    row is committed as soon as its INSERT succeeds.
    """

    def __init__(self, conn: Connection, table_name: str):
        """
        Initialize seeder.

        Args:
            conn: PostgreSQL connection
            table_name: Table to insert into
        """
        self.conn = conn
        self.table_name = table_name
        self._insert_sql = sql.SQL(
            "INSERT INTO {table} ({columns}) VALUES ({placeholders}) RETURNING emp_id"
        ).format(
            table=sql.Identifier(table_name),
            columns=sql.SQL(", ").join(map(sql.Identifier, INSERT_COLUMNS)),
            placeholders=sql.SQL(", ").join(sql.Placeholder() * len(INSERT_COLUMNS)),
        )

    def insert(self, employee: Employee) -> Employee:
        """
        Insert a single employee and record its emp_id.

        Args:
            employee: Row to insert

        Returns:
            The same employee with emp_id set

        Raises:
            psycopg.Error: On database failure
        """
        with self.conn.cursor() as cur:
            cur.execute(self._insert_sql, employee.to_params())
            employee.emp_id = cur.fetchone()[0]
        return employee

    def seed(self, generator: EmployeeGenerator, count: int = SEED_COUNT) -> list[Employee]:
        """
        Generate and insert count employees.

        Stops at the first failing row. Rows inserted before it stay in the
        table.

        Args:
            generator: Source of employee rows
            count: Number of rows to insert

        Returns:
            Inserted employees with emp_id populated

        Raises:
            InsertError: If any row fails to insert
        """
        inserted: list[Employee] = []
        for index in range(count):
            employee = generator.generate()
            try:
                self.insert(employee)
            except psycopg.Error as e:
                raise InsertError(self.table_name, index, len(inserted), str(e)) from e
            logger.debug(
                f"Inserted {employee.firstname} {employee.lastname} "
                f"({employee.role}) as emp_id={employee.emp_id}"
            )
            inserted.append(employee)

        logger.info(f"Inserted {len(inserted)} rows into {self.table_name}")
        return inserted
