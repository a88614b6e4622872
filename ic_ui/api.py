"""Public API surface for ic_ui."""

from __future__ import annotations

from typing import Sequence

from ic_ui.tui.screens.search_screen import SearchScreen
from ic_ui.tui.system.components.list_filter import FilterResult, filter_entries
from ic_ui.tui.system.components.selection_session import SelectionSession
from ic_ui.tui.system.facade import TerminalChooser
from ic_ui.tui.system.headless import HeadlessChooser
from ic_ui.tui.system.models import (
    Entry,
    K,
    KeyAction,
    KeyEvent,
    KeyEventKind,
    SessionOptions,
)
from ic_ui.tui.system.protocols import Chooser


def choose(
    items: Sequence[Entry[K]],
    *,
    title: str = " ichoose ",
    text: str = "",
    multi_select: bool = False,
    default_list: Sequence[Entry[K]] | None = None,
) -> list[K]:
    """Run an interactive selection on the terminal and return the chosen keys.

    An empty list means nothing was chosen.
    """
    options = SessionOptions(
        title=title,
        text=text,
        multi_select=multi_select,
        default_list=default_list,
    )
    return TerminalChooser().choose(items, options)


__all__ = [
    "Chooser",
    "Entry",
    "FilterResult",
    "HeadlessChooser",
    "KeyAction",
    "KeyEvent",
    "KeyEventKind",
    "SearchScreen",
    "SelectionSession",
    "SessionOptions",
    "TerminalChooser",
    "choose",
    "filter_entries",
]
