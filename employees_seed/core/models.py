"""
Core data models for employees-seed.

Defines the employee record, the fixed table layout and the value sets
that generated rows are drawn from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

TABLE_NAME = "employees"
SEED_COUNT = 50
EMAIL_DOMAIN = "techtech.com"

FIRST_NAMES = ("John", "Jane", "Alice", "Bob", "Charlie")
LAST_NAMES = ("Doe", "Smith", "Johnson", "Williams", "Brown")
ROLES = ("Janitor", "SoftwareDev", "AiEthics", "ItConsultant", "CleaningLady")


@dataclass(frozen=True)
class ColumnDef:
    """Column in the provisioned table."""

    name: str
    ddl_type: str
    pg_type: str

    def to_ddl(self) -> str:
        return f"{self.name} {self.ddl_type}"


EMPLOYEE_COLUMNS = (
    ColumnDef("emp_id", "SERIAL PRIMARY KEY", "integer"),
    ColumnDef("firstname", "VARCHAR(50)", "character varying"),
    ColumnDef("lastname", "VARCHAR(50)", "character varying"),
    ColumnDef("email", "VARCHAR(100)", "character varying"),
    ColumnDef("news", "BOOLEAN", "boolean"),
    ColumnDef("role", "VARCHAR(50)", "character varying"),
)

# emp_id is assigned by the SERIAL default
INSERT_COLUMNS = tuple(col.name for col in EMPLOYEE_COLUMNS if col.name != "emp_id")


@dataclass
class ColumnInfo:
    """
    Column metadata from database introspection.

    Attributes:
        name: Column name
        pg_type: PostgreSQL data type as reported by information_schema
        is_nullable: Whether column allows NULL values
        default_value: Database default value expression (if any)
    """

    name: str
    pg_type: str
    is_nullable: bool
    default_value: Optional[str] = None


@dataclass
class Employee:
    """
    A single employee row.

    emp_id is None until the row has been inserted.
    """

    firstname: str
    lastname: str
    email: str
    role: str
    news: bool = False
    emp_id: Optional[int] = None

    @classmethod
    def create(cls, firstname: str, lastname: str, role: str) -> Employee:
        """Build an employee whose email is derived from the name pair."""
        return cls(
            firstname=firstname,
            lastname=lastname,
            email=derive_email(firstname, lastname),
            role=role,
            news=False,
        )

    def to_params(self) -> tuple[Any, ...]:
        """Values in INSERT_COLUMNS order."""
        return (self.firstname, self.lastname, self.email, self.news, self.role)


def derive_email(firstname: str, lastname: str) -> str:
    """JohnDoe@techtech.com style address for a name pair."""
    return f"{firstname}{lastname}@{EMAIL_DOMAIN}"
