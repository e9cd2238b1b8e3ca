"""CLI entry point for employees-seed."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from employees_seed import __version__
from employees_seed.config import Settings, load_connection_string
from employees_seed.core.connection import open_connection
from employees_seed.core.generator import EmployeeGenerator
from employees_seed.exceptions import EmployeesSeedError
from employees_seed.orchestrator import SeedOrchestrator

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(__version__, package_name="employees-seed")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    help="JSON file with connectionString (default: conString.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every step, including each row")
def cli(config_path: Optional[Path], verbose: bool) -> None:
    """Create the employees table and seed it with 50 rows if it is missing."""
    try:
        settings = Settings()
    except ValidationError as e:
        click.echo(f"Error: invalid EMPLOYEES_SEED_* settings: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path = config_path or settings.config_path

    try:
        connection_string = load_connection_string(path)

        with open_connection(connection_string) as conn:
            click.echo("Successfully connected to the database")
            orchestrator = SeedOrchestrator(conn)
            orchestrator.run(EmployeeGenerator.from_time(), echo=click.echo)

    except EmployeesSeedError as e:
        logger.error(f"{e.stage} failed: {type(e).__name__}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
