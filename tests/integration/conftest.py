"""Pytest configuration and shared fixtures for database tests."""

import os
from collections.abc import Iterator

import psycopg
import pytest
from faker import Faker
from psycopg import Connection, sql

from employees_seed.core.generator import EmployeeGenerator

TEST_DSN = os.environ.get(
    "EMPLOYEES_SEED_TEST_DSN", "postgresql://localhost/employees_seed_test"
)
TABLE = "employees"
# Every table a test may create; dropped before and after each test
TEST_TABLES = (TABLE, "Staff", "lowercase_t")


def drop_test_tables(conn: Connection) -> None:
    for name in TEST_TABLES:
        conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(name)))


@pytest.fixture
def dsn() -> str:
    return TEST_DSN


@pytest.fixture
def db_conn(dsn: str) -> Iterator[Connection]:
    """
    Provide an autocommit connection with none of TEST_TABLES present.

    Skips when the test database is unreachable.
    """
    try:
        conn = psycopg.connect(dsn, autocommit=True, connect_timeout=3)
    except psycopg.OperationalError as e:
        pytest.skip(f"test database unavailable: {e}")

    drop_test_tables(conn)

    yield conn

    drop_test_tables(conn)
    conn.close()


@pytest.fixture
def existing_table(db_conn: Connection) -> str:
    """An employees table created outside the program, holding 3 rows."""
    db_conn.execute(
        f"""
        CREATE TABLE {TABLE} (
            emp_id SERIAL PRIMARY KEY,
            firstname VARCHAR(50),
            lastname VARCHAR(50),
            email VARCHAR(100),
            news BOOLEAN,
            role VARCHAR(50)
        )
        """
    )
    with db_conn.cursor() as cur:
        cur.executemany(
            f"INSERT INTO {TABLE} (firstname, lastname, email, news, role) "
            f"VALUES (%s, %s, %s, %s, %s)",
            [
                ("Ada", "Lovelace", "AdaLovelace@techtech.com", True, "SoftwareDev"),
                ("Alan", "Turing", "AlanTuring@techtech.com", False, "AiEthics"),
                ("Grace", "Hopper", "GraceHopper@techtech.com", False, "ItConsultant"),
            ],
        )
    return TABLE


@pytest.fixture
def generator() -> EmployeeGenerator:
    fake = Faker()
    fake.seed_instance(1234)
    return EmployeeGenerator(fake)
