"""CLI entrypoint for canvas-desktop."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Canvas desktop window manager")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("documents")
def documents_cmd(
    root: Path | None = typer.Option(None, "--root", help="Project root holding config/"),
) -> None:
    """List available documents."""
    try:
        commands.documents_list(root=root)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("replay")
def replay_cmd(
    script: Path = typer.Argument(..., help="YAML list of desktop events"),
    root: Path | None = typer.Option(None, "--root", help="Project root holding config/"),
) -> None:
    """Replay desktop events and print the resulting windows."""
    try:
        commands.replay(script=script, root=root)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def config_show_cmd(
    root: Path | None = typer.Option(None, "--root", help="Project root holding config/"),
) -> None:
    """Show effective configuration."""
    try:
        commands.config_show(root=root)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
