"""
Command-line interface for iforgor.

The CLI tool for all those commands you forget about: pick a registered
script from a searchable list and run it.
"""

from __future__ import annotations

import typer

from ic_common.errors import ICError
from ic_ui.cli.commands.source import create_source_app
from ic_ui.cli.common import exit_with_error
from ic_ui.flows.launcher import ConsolePrompter, run_launcher_loop
from ic_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

source_app = create_source_app(ctx_store)

app = typer.Typer(
    help="The CLI tool for all those commands you forget about.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    purge_all: bool = typer.Option(
        False,
        "--purge-all",
        help=(
            "Cleanup config file, which will remove all registered sources and commands. "
            "Use it in case of file corruption or change in format after an update."
        ),
    ),
    purge_history: bool = typer.Option(
        False, "--purge-history", help="Cleanup the history of ran commands."
    ),
    registry_path: bool = typer.Option(
        False, "--registry-path", help="Display the registry path."
    ),
) -> None:
    """Without a subcommand, open the interactive command picker."""
    configure_logging()
    launcher = ctx_store.launcher

    if registry_path:
        typer.echo(f"Registry path: {launcher.paths.registry}")
        raise typer.Exit()

    try:
        if purge_all:
            launcher.purge_all()
            typer.echo("🗑️ Purged registry and history!")
            raise typer.Exit()
        if purge_history:
            launcher.purge_history()
            typer.echo("🗑️ Purged history!")
            raise typer.Exit()
        if ctx.invoked_subcommand is None:
            run_launcher_loop(
                ctx_store.chooser,
                launcher,
                ConsolePrompter(),
                ctx_store.interrupts,
            )
    except ICError as exc:
        exit_with_error(exc)


@app.command("reload")
def reload() -> None:
    """Reload commands from sources."""
    launcher = ctx_store.launcher
    try:
        for source in launcher.list_sources():
            typer.echo(f"Loading source: {source}")
        count = launcher.reload()
        launcher.save()
    except ICError as exc:
        exit_with_error(exc)
    typer.echo(f"Loaded {count} commands")


app.add_typer(source_app, name="source")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
