"""Frame projection of a SelectionSession.

Everything here reads session state and never writes it. The pure helpers
return prompt_toolkit fragments so they can be asserted on without a
terminal; the two ``UIControl`` classes plug them into a layout and are the
only place that knows the size of the region being drawn.
"""

from __future__ import annotations

from typing import Sequence

from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.formatted_text.utils import split_lines
from prompt_toolkit.layout.controls import UIContent, UIControl
from rich.console import Console
from rich.text import Text

from ic_ui.tui.core import theme
from ic_ui.tui.system.components.selection_session import SelectionSession
from ic_ui.tui.system.models import Entry

SEARCH_LABEL = "Search :"
SEARCH_LABEL_WIDTH = 9
SEARCH_PLACEHOLDER = " "
HIGHLIGHT_SYMBOL = "> "
HIGHLIGHT_SPACING = "  "
CHECKED_MARKER = "[X] "
UNCHECKED_MARKER = "[ ] "
SCROLL_PADDING = 1
LIST_MIN_HEIGHT = 3
HELP_HEIGHT = 5


def legend_items(multi_select: bool) -> list[tuple[str, str]]:
    """Return (action, keys) pairs shown in the bottom border."""
    items = [("Change Line", "Up/Down")]
    if multi_select:
        items.append(("Toggle select", "Right"))
        items.append(("Toggle all", "Left"))
    items.append(("Confirm", "Enter"))
    items.append(("Quit", "Esc"))
    return items


def legend_fragments(multi_select: bool) -> StyleAndTextTuples:
    fragments: StyleAndTextTuples = []
    for name, keys in legend_items(multi_select):
        fragments.append(("class:legend", f" {name} "))
        fragments.append(("class:legend.key", f"<{keys}>"))
    fragments.append(("class:legend", " "))
    return fragments


def title_fragments(title: str) -> StyleAndTextTuples:
    return [("class:frame.label", title)]


def search_fragments(search_text: str) -> StyleAndTextTuples:
    # An empty field still draws one cell so the input row stays visible.
    return [("class:search", search_text or SEARCH_PLACEHOLDER)]


def row_text(
    entry: Entry,
    *,
    highlighted: bool,
    multi_select: bool,
    checked: bool = False,
) -> str:
    prefix = HIGHLIGHT_SYMBOL if highlighted else HIGHLIGHT_SPACING
    if multi_select:
        prefix += CHECKED_MARKER if checked else UNCHECKED_MARKER
    return f"{prefix}{entry.name}"


def list_fragments(session: SelectionSession) -> list[StyleAndTextTuples]:
    """Return one fragment line per displayed entry."""
    multi = session.options.multi_select
    lines: list[StyleAndTextTuples] = []
    for position, entry in enumerate(session.displayed):
        highlighted = position == session.highlighted
        checked = multi and session.is_selected(entry.key)
        style = "class:row"
        if highlighted:
            style = "class:row.highlighted"
        elif checked:
            style = "class:row.checked"
        text = row_text(entry, highlighted=highlighted, multi_select=multi, checked=checked)
        lines.append([(style, text)])
    return lines


def scroll_offset(
    offset: int,
    highlighted: int | None,
    total: int,
    height: int,
    padding: int = SCROLL_PADDING,
) -> int:
    """Return the first visible row so ``highlighted`` stays in view.

    Keeps ``padding`` rows of context above and below the highlighted row
    whenever the region is tall enough, and never scrolls past the end.
    """
    if height <= 0 or total <= 0:
        return 0
    max_offset = max(0, total - height)
    if highlighted is None:
        return max(0, min(offset, max_offset))
    padding = max(0, min(padding, (height - 1) // 2))
    if highlighted < offset + padding:
        offset = highlighted - padding
    elif highlighted > offset + height - 1 - padding:
        offset = highlighted - height + 1 + padding
    return max(0, min(offset, max_offset))


def render_help_lines(text: str, width: int, height: int) -> list[StyleAndTextTuples]:
    """Word-wrap ``text`` to ``width`` with rich and keep at most ``height`` lines."""
    if not text or width <= 0 or height <= 0:
        return []
    console = Console(
        width=width,
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
    )
    with console.capture() as cap:
        console.print(Text(text, style=theme.RICH_HELP_STYLE), end="")
    lines = list(split_lines(to_formatted_text(ANSI(cap.get()))))
    return lines[:height]


def fragments_text(fragments: Sequence[tuple]) -> str:
    return "".join(fragment[1] for fragment in fragments)


class EntryListControl(UIControl):
    """Scrollable list region; remembers its own scroll position between frames."""

    def __init__(self, session: SelectionSession) -> None:
        self._session = session
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def is_focusable(self) -> bool:
        return False

    def create_content(self, width: int, height: int) -> UIContent:
        lines = list_fragments(self._session)
        self._offset = scroll_offset(
            self._offset, self._session.highlighted, len(lines), height
        )
        visible = lines[self._offset : self._offset + height]
        return UIContent(get_line=lambda i: visible[i], line_count=len(visible))


class HelpTextControl(UIControl):
    def __init__(self, text: str) -> None:
        self._text = text

    def is_focusable(self) -> bool:
        return False

    def create_content(self, width: int, height: int) -> UIContent:
        lines = render_help_lines(self._text, width, height)
        return UIContent(get_line=lambda i: lines[i], line_count=len(lines))
