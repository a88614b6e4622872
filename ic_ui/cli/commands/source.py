from __future__ import annotations

from pathlib import Path

import typer

from ic_common.errors import ICError
from ic_ui.cli.common import exit_with_error
from ic_ui.wiring.dependencies import UIContext


def create_source_app(ctx: UIContext) -> typer.Typer:
    """Build the source Typer app (add/list/remove commands sources)."""
    app = typer.Typer(help="Manage the TOML files commands are loaded from.", no_args_is_help=True)

    @app.command("add")
    def add_source(path: Path = typer.Argument(..., help="TOML commands source to register.")) -> None:
        """Register a source and load its commands."""
        launcher = ctx.launcher
        try:
            typer.echo(f"Adding source \"{path}\"")
            canonical, commands = launcher.add_source(path)
            typer.echo(f"Loading source: {canonical}")
            for command in commands:
                typer.echo(f"- Added command: {command.name}")
            launcher.save()
        except ICError as exc:
            exit_with_error(exc)

    @app.command("list")
    def list_sources() -> None:
        """List all registered sources."""
        try:
            sources = ctx.launcher.list_sources()
        except ICError as exc:
            exit_with_error(exc)
        for source in sources:
            typer.echo(str(source))

    @app.command("remove")
    def remove_source(path: Path = typer.Argument(..., help="Registered source to forget.")) -> None:
        """Unregister a source; its commands stay until `iforgor reload`."""
        launcher = ctx.launcher
        try:
            removed = launcher.remove_source(path)
            launcher.save()
        except ICError as exc:
            exit_with_error(exc)
        typer.echo(f"Removed source \"{removed}\"")
        typer.echo(
            "Commands in that source are still registered. Run "
            "`iforgor reload` to reload commands from remaining sources only"
        )

    return app
