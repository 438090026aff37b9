"""Main Typer application: imports and registers all CLI commands.

Entry point: ``pushsource`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from pushsource.cli.commands.config_cmd import config_cmd
from pushsource.cli.commands.replay import replay_cmd
from pushsource.config import config

app = typer.Typer(
    name="pushsource",
    help="pushsource: push notification fan-out for new posts and comments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="replay", help="Replay recorded host events.")(replay_cmd)
app.command(name="config", help="Show the effective configuration.")(config_cmd)


@app.callback()
def configure_logging(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override PUSHSOURCE_LOG_LEVEL."
    ),
) -> None:
    """Route log output through Rich at the configured level."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
