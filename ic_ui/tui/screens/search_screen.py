from __future__ import annotations

import logging
from functools import partial
from typing import Any, Generic

from prompt_toolkit.application import Application
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.containers import AnyContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from ic_common.errors import TerminalIOError
from ic_ui.tui.core import theme
from ic_ui.tui.system.components.render import (
    HELP_HEIGHT,
    LIST_MIN_HEIGHT,
    SEARCH_LABEL,
    SEARCH_LABEL_WIDTH,
    EntryListControl,
    HelpTextControl,
    legend_fragments,
    search_fragments,
    title_fragments,
)
from ic_ui.tui.system.components.selection_session import SelectionSession
from ic_ui.tui.system.models import K, KeyAction, KeyEvent

logger = logging.getLogger(__name__)

_KEY_ACTIONS: dict[str, KeyAction] = {
    "escape": KeyAction.CANCEL,
    "c-c": KeyAction.CANCEL,
    "enter": KeyAction.CONFIRM,
    "backspace": KeyAction.ERASE,
    "up": KeyAction.MOVE_UP,
    "down": KeyAction.MOVE_DOWN,
    "left": KeyAction.TOGGLE_ALL,
    "right": KeyAction.TOGGLE_ONE,
}


def key_event_for(data: str) -> KeyEvent:
    """Map the text of an unbound key press to an insert or an ignored event."""
    if len(data) == 1 and data.isprintable():
        return KeyEvent.insert(data)
    return KeyEvent(KeyAction.IGNORED)


def pasted_events(data: str) -> list[KeyEvent]:
    """Split a bracketed paste into one insert per printable character."""
    return [KeyEvent.insert(char) for char in data if char.isprintable()]


class SearchScreen(Generic[K]):
    """Full-screen search-and-select loop driving one SelectionSession.

    prompt_toolkit renders a frame, waits for exactly one key, and the
    bound handler forwards it to the session; the application exits as soon
    as the session raises its exit flag. Raw mode and the alternate screen
    are held only while ``run`` is active.
    """

    def __init__(
        self,
        session: SelectionSession[K],
        *,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self._session = session
        self.list_control = EntryListControl(session)
        self.help_control = HelpTextControl(session.options.text)
        self._kb = self._bindings()

        search_row = VSplit(
            [
                Window(
                    FormattedTextControl(SEARCH_LABEL),
                    width=SEARCH_LABEL_WIDTH,
                    style="class:search.label",
                ),
                Window(
                    FormattedTextControl(lambda: search_fragments(session.search_text)),
                    height=1,
                ),
            ],
            height=1,
        )
        body = HSplit(
            [
                search_row,
                Window(height=1),
                Window(self.list_control, height=Dimension(min=LIST_MIN_HEIGHT)),
                Window(height=1),
                Window(
                    self.help_control,
                    height=Dimension(max=HELP_HEIGHT, preferred=HELP_HEIGHT),
                ),
            ]
        )
        root_container = bordered_frame(
            body,
            title=lambda: title_fragments(session.options.title),
            legend=lambda: legend_fragments(session.options.multi_select),
        )

        self._app: Application[list[K]] = Application(
            layout=Layout(root_container),
            key_bindings=self._kb,
            style=_search_style(),
            full_screen=True,
            input=input,
            output=output,
        )

    @property
    def session(self) -> SelectionSession[K]:
        return self._session

    @property
    def app(self) -> Application[list[K]]:
        return self._app

    def run(self) -> list[K]:
        """Block until confirm or cancel and return the selected keys.

        Terminal failures surface as TerminalIOError once prompt_toolkit has
        restored the terminal mode.
        """
        try:
            return self._app.run()
        except (OSError, EOFError) as exc:
            raise TerminalIOError(
                "Terminal I/O failed during selection",
                search_text=self._session.search_text,
                highlighted=self._session.highlighted,
                cause=exc,
            ) from exc

    def _dispatch(self, event: KeyPressEvent, key_event: KeyEvent) -> None:
        self._session.handle(key_event)
        if self._session.exit_requested:
            self._exit(event.app, self._session.result())

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        # Escape is eager, so Alt+<char> (ESC then char) cancels instead of inserting.
        for key, action in _KEY_ACTIONS.items():
            kb.add(key, eager=key == "escape")(
                partial(self._on_bound_key, KeyEvent(action))
            )

        @kb.add(Keys.Any)
        def _(event: KeyPressEvent) -> None:
            self._dispatch(event, key_event_for(event.data))

        @kb.add(Keys.BracketedPaste)
        def _paste(event: KeyPressEvent) -> None:
            for key_event in pasted_events(event.data):
                if self._session.exit_requested:
                    break
                self._dispatch(event, key_event)

        return kb

    def _on_bound_key(self, key_event: KeyEvent, event: KeyPressEvent) -> None:
        self._dispatch(event, key_event)

    def _exit(self, app: Application[Any], result: list[K]) -> None:
        try:
            app.exit(result=result)
        except Exception as exc:  # pragma: no cover
            if "Return value already set" not in str(exc):
                raise


def bordered_frame(
    body: AnyContainer,
    *,
    title: Any,
    legend: Any,
) -> HSplit:
    """Thick border with ``title`` centered on top and ``legend`` centered below."""
    fill = partial(Window, style="class:frame.border")

    def centered_row(left: str, content: Any, right: str) -> VSplit:
        return VSplit(
            [
                fill(width=1, height=1, char=left),
                fill(char=theme.BORDER_HORIZONTAL),
                Window(
                    FormattedTextControl(content),
                    height=1,
                    dont_extend_width=True,
                ),
                fill(char=theme.BORDER_HORIZONTAL),
                fill(width=1, height=1, char=right),
            ],
            height=1,
        )

    middle = VSplit(
        [
            fill(width=1, char=theme.BORDER_VERTICAL),
            Window(width=1),
            body,
            Window(width=1),
            fill(width=1, char=theme.BORDER_VERTICAL),
        ]
    )
    return HSplit(
        [
            centered_row(theme.BORDER_TOP_LEFT, title, theme.BORDER_TOP_RIGHT),
            middle,
            centered_row(theme.BORDER_BOTTOM_LEFT, legend, theme.BORDER_BOTTOM_RIGHT),
        ]
    )


def _search_style() -> Style:
    return Style.from_dict(theme.prompt_toolkit_search_style())
