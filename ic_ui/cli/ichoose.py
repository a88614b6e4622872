"""
Command-line interface for ichoose.

Lets users choose among items read from stdin with a search-and-select TUI
and prints the chosen ids on stdout.
"""

from __future__ import annotations

from typing import Optional

import typer

from ic_common.errors import ICError
from ic_ui.cli.common import exit_with_error
from ic_ui.tui.system.models import Entry, SessionOptions
from ic_ui.wiring.dependencies import UIContext, configure_logging

ENTRY_SEPARATOR = " @ "

ctx_store = UIContext()

app = typer.Typer(
    help=(
        "Let users choose among items with a nice TUI. "
        "Choices are read from stdin in format `ID @ NAME`."
    ),
    add_completion=False,
)


def parse_entries(text: str) -> list[Entry[str]]:
    """Parse ``ID @ NAME`` lines; a line without a separator is its own name."""
    entries: list[Entry[str]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        key, sep, name = line.partition(ENTRY_SEPARATOR)
        key = key.strip()
        entries.append(Entry(key=key, name=name if sep else key))
    return entries


@app.command()
def choose(
    title: Optional[str] = typer.Option(
        None, "--title", help="Customize the title of the TUI."
    ),
    text: Optional[str] = typer.Option(
        None, "--text", help="Customize the text displayed at the bottom of the TUI."
    ),
    multi: bool = typer.Option(
        False, "--multi", help="Let the user pick multiple choices."
    ),
) -> None:
    """Read entries from stdin and print the chosen ids, one per line."""
    configure_logging()
    entries = parse_entries(typer.get_text_stream("stdin").read())
    options: SessionOptions[str] = SessionOptions(
        title=f" {title or 'ichoose'} ",
        text=text or "",
        multi_select=multi,
    )
    try:
        choices = ctx_store.chooser.choose(entries, options)
    except ICError as exc:
        exit_with_error(exc)

    if not choices:
        raise typer.Exit(1)
    for choice in choices:
        typer.echo(choice)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
