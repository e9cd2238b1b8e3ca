"""Core functionality for employees-seed."""

from employees_seed.core.connection import open_connection, ping
from employees_seed.core.generator import EmployeeGenerator
from employees_seed.core.models import ColumnInfo, Employee
from employees_seed.core.provisioner import SchemaProvisioner
from employees_seed.core.schema import SchemaInspector
from employees_seed.core.seeder import EmployeeSeeder

__all__ = [
    "ColumnInfo",
    "Employee",
    "EmployeeGenerator",
    "EmployeeSeeder",
    "SchemaInspector",
    "SchemaProvisioner",
    "open_connection",
    "ping",
]
