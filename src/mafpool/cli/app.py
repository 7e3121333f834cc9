"""Typer CLI application definition for mafpool."""

from __future__ import annotations

import typer

from mafpool.cli.commands.chat import chat
from mafpool.config import Settings
from mafpool.logging import setup_logging

app = typer.Typer(
    name="mafpool",
    help="Register OpenAI chat agents in an agent pool",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging from MAFPOOL_* settings before any command runs."""
    setup_logging(Settings())


app.command("chat")(chat)
