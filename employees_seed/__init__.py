"""
employees-seed - Provision and seed a demo employees table in PostgreSQL.

On first run against a database it creates the employees table and inserts
50 generated rows. If the table already exists it does nothing.
"""

__version__ = "0.1.0"

from employees_seed.core.models import Employee
from employees_seed.exceptions import EmployeesSeedError
from employees_seed.orchestrator import ProvisionResult, SeedOrchestrator

__all__ = ["Employee", "EmployeesSeedError", "ProvisionResult", "SeedOrchestrator", "__version__"]
