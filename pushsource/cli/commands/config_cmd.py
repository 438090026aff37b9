"""``pushsource config``: show the effective configuration."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from pushsource.config import config

console = Console()


def config_cmd() -> None:
    """Print every setting after .env and PUSHSOURCE_* overrides."""
    table = Table(title="pushsource configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in config.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)
