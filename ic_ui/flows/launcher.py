"""Interactive loop of the iforgor launcher."""

from __future__ import annotations

import logging

import typer

from ic_common.errors import SelectionContractError
from ic_launcher.api import InterruptPolicy, LauncherService, Prompter
from ic_ui.tui.system.models import Entry, SessionOptions
from ic_ui.tui.system.protocols import Chooser

logger = logging.getLogger(__name__)

LAUNCHER_TITLE = " iforgor "
LAUNCHER_HELP = (
    "Run `iforgor --help` to learn about subcommands. "
    "Search for multiple search terms by separating them with commas `,` "
    "Empty search displays history, type anything (including spaces) to "
    "display the filtered full list of commands."
)
RUN_SEPARATOR = "━━━━━━━━━━━━━━━"


def _as_entries(pairs: list[tuple[str, str]]) -> list[Entry[str]]:
    return [Entry(key=command_id, name=name) for command_id, name in pairs]


class ConsolePrompter:
    """Prompter reading answers from the terminal with typer."""

    def ask(self, label: str) -> str:
        return typer.prompt(label, default="", show_default=False)

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=False)

    def info(self, message: str) -> None:
        typer.echo(message)

    def pause(self, message: str) -> None:
        typer.echo(message, nl=False)
        typer.get_text_stream("stdin").readline()


def run_launcher_loop(
    chooser: Chooser,
    launcher: LauncherService,
    prompter: Prompter,
    interrupts: InterruptPolicy,
) -> int:
    """Offer commands until the user quits; returns how many were run."""
    runs = 0
    while True:
        options = SessionOptions(
            title=LAUNCHER_TITLE,
            text=LAUNCHER_HELP,
            default_list=_as_entries(launcher.history_entries()),
        )
        choices = chooser.choose(_as_entries(launcher.entries()), options)
        if not choices:
            break
        if len(choices) > 1:
            raise SelectionContractError(
                "Bug: there should be only one entry selected",
                choices=choices,
            )

        result = launcher.run_command(choices[0], prompter)
        launcher.save_history()
        if result is None:
            continue
        runs += 1

        # Ctrl+C pressed just after the script exits must not kill the launcher.
        with interrupts.ignoring():
            prompter.pause(f"\n🏁 {result.describe()}, press Enter to proceed.")
        prompter.info(RUN_SEPARATOR)

    logger.debug("Launcher loop finished after %d runs", runs)
    return runs
