from __future__ import annotations

from typing import Mapping

# rich style for the caller-supplied help text under the list
RICH_HELP_STYLE = "cyan italic"
RICH_ERROR_STYLE = "bold red"

BORDER_TOP_LEFT = "┏"
BORDER_TOP_RIGHT = "┓"
BORDER_BOTTOM_LEFT = "┗"
BORDER_BOTTOM_RIGHT = "┛"
BORDER_HORIZONTAL = "━"
BORDER_VERTICAL = "┃"


def error_message(message: str) -> str:
    return f"[{RICH_ERROR_STYLE}]{message}[/{RICH_ERROR_STYLE}]"


def prompt_toolkit_search_style() -> Mapping[str, str]:
    return {
        "frame.border": "",
        "frame.label": "fg:ansimagenta bold",
        "legend": "",
        "legend.key": "fg:ansiblue bold",
        "search.label": "",
        "search": "underline",
        "row": "",
        "row.highlighted": "fg:ansiblue bold",
        "row.checked": "fg:ansigreen",
    }
