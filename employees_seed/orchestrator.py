"""Provisioning orchestrator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from psycopg import Connection

from employees_seed.core.generator import EmployeeGenerator
from employees_seed.core.models import SEED_COUNT, TABLE_NAME, Employee
from employees_seed.core.provisioner import SchemaProvisioner
from employees_seed.core.schema import SchemaInspector
from employees_seed.core.seeder import EmployeeSeeder

logger = logging.getLogger(__name__)


@dataclass
class ProvisionResult:
    """
    Outcome of a provisioning run.

    Attributes:
        table_name: Target table
        created: Whether the table was created by this run
        inserted: Rows inserted by this run (empty if the table existed)
        row_count: Rows in the table once the run finished
    """

    table_name: str
    created: bool
    inserted: list[Employee] = field(default_factory=list)
    row_count: int = 0


class SeedOrchestrator:
    """Create and seed the employees table if it doesn't exist."""

    def __init__(self, conn: Connection, table_name: str = TABLE_NAME):
        """
        Initialize orchestrator.

        Args:
            conn: Open PostgreSQL connection
            table_name: Table to provision
        """
        self.table_name = table_name
        self.inspector = SchemaInspector(conn)
        self.provisioner = SchemaProvisioner(conn)
        self.seeder = EmployeeSeeder(conn, table_name)

    def run(
        self,
        generator: EmployeeGenerator,
        count: int = SEED_COUNT,
        echo: Optional[Callable[[str], None]] = None,
    ) -> ProvisionResult:
        """
        Check for the table and, when absent, create and seed it.

        Existence check and creation are separate statements. Errors from
        any stage propagate unchanged.

        Args:
            generator: Source of employee rows
            count: Rows to insert into a newly created table
            echo: Receives human-readable progress lines

        Returns:
            ProvisionResult describing what was done and the final row count

        Raises:
            QueryError: If the existence check or the final row count fails
            SchemaError: If CREATE TABLE fails
            InsertError: If a row fails to insert
        """
        emit = echo or (lambda message: None)

        if self.inspector.table_exists(self.table_name):
            logger.info(f"Table {self.table_name} exists, nothing to do")
            emit(f"Table {self.table_name} already exists")
            return self._finish(created=False, inserted=[])

        self.provisioner.create_table(self.table_name)
        emit(f"Table {self.table_name} created successfully")

        inserted = self.seeder.seed(generator, count=count)
        emit(f"{len(inserted)} employees inserted successfully")

        return self._finish(created=True, inserted=inserted)

    def _finish(self, created: bool, inserted: list[Employee]) -> ProvisionResult:
        row_count = self.inspector.count_rows(self.table_name)
        logger.info(f"Table {self.table_name} holds {row_count} rows")
        return ProvisionResult(
            table_name=self.table_name,
            created=created,
            inserted=inserted,
            row_count=row_count,
        )
