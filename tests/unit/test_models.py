"""Tests for core models."""

from employees_seed.core.models import (
    EMPLOYEE_COLUMNS,
    FIRST_NAMES,
    INSERT_COLUMNS,
    LAST_NAMES,
    ROLES,
    Employee,
    derive_email,
)
from employees_seed.core.provisioner import build_create_table


def test_derive_email():
    assert derive_email("John", "Doe") == "JohnDoe@techtech.com"
    assert derive_email("Bob", "Bob") == "BobBob@techtech.com"


def test_employee_create():
    employee = Employee.create("Alice", "Brown", "AiEthics")

    assert employee.firstname == "Alice"
    assert employee.lastname == "Brown"
    assert employee.email == "AliceBrown@techtech.com"
    assert employee.role == "AiEthics"
    assert employee.news is False
    assert employee.emp_id is None


def test_employee_params_follow_insert_columns():
    employee = Employee.create("Jane", "Smith", "Janitor")
    params = dict(zip(INSERT_COLUMNS, employee.to_params()))

    assert params == {
        "firstname": "Jane",
        "lastname": "Smith",
        "email": "JaneSmith@techtech.com",
        "news": False,
        "role": "Janitor",
    }


def test_table_layout():
    assert [c.name for c in EMPLOYEE_COLUMNS] == [
        "emp_id",
        "firstname",
        "lastname",
        "email",
        "news",
        "role",
    ]
    assert "emp_id" not in INSERT_COLUMNS


def test_value_sets_have_five_entries():
    assert len(set(FIRST_NAMES)) == 5
    assert len(set(LAST_NAMES)) == 5
    assert len(set(ROLES)) == 5


def test_create_table_statement():
    statement = build_create_table("employees")

    assert statement.as_string(None) == (
        'CREATE TABLE "employees" (\n'
        "    emp_id SERIAL PRIMARY KEY,\n"
        "    firstname VARCHAR(50),\n"
        "    lastname VARCHAR(50),\n"
        "    email VARCHAR(100),\n"
        "    news BOOLEAN,\n"
        "    role VARCHAR(50)\n"
        ")"
    )


def test_create_table_statement_quotes_name():
    statement = build_create_table("Staff")

    assert statement.as_string(None).startswith('CREATE TABLE "Staff" (')
