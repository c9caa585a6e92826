"""Typer application for the template-copy console command."""

from __future__ import annotations

import typer

from template_copy.cli.commands.copy_cmd import COMMAND_DESCRIPTION, copy

app = typer.Typer(
    name="template-copy",
    help=COMMAND_DESCRIPTION,
    add_completion=False,
)
app.command(name="copy")(copy)


def main() -> None:
    app()


__all__ = ["app", "main"]
