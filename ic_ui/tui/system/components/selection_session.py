"""Keyboard-driven state machine behind the search-and-select screen.

The session owns the search text, the selection set, the highlighted row
and the exit flag. It never touches the terminal: a front-end feeds it one
``KeyEvent`` at a time and reads its state back to draw a frame.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Sequence

from ic_ui.tui.system.components.list_filter import FilterResult, filter_entries
from ic_ui.tui.system.models import Entry, K, KeyAction, KeyEvent, KeyEventKind, SessionOptions

logger = logging.getLogger(__name__)


class SelectionSession(Generic[K]):
    def __init__(
        self,
        items: Sequence[Entry[K]],
        options: SessionOptions[K] | None = None,
    ) -> None:
        self._items = items
        self._options: SessionOptions[K] = options or SessionOptions()
        self._search_text = ""
        # dict keeps insertion order, which makes iteration deterministic
        self._selected: dict[K, None] = {}
        self._exit = False
        self._displayed: FilterResult[K] = FilterResult(items, ())
        self._highlighted: int | None = None
        self._refresh()

        self._handlers: dict[KeyAction, Callable[[KeyEvent], None]] = {
            KeyAction.CANCEL: self._cancel,
            KeyAction.CONFIRM: self._confirm,
            KeyAction.INSERT: self._insert,
            KeyAction.ERASE: self._erase,
            KeyAction.MOVE_UP: lambda _event: self._move(-1),
            KeyAction.MOVE_DOWN: lambda _event: self._move(1),
            KeyAction.TOGGLE_ALL: self._toggle_all,
            KeyAction.TOGGLE_ONE: self._toggle_one,
        }

    @property
    def options(self) -> SessionOptions[K]:
        return self._options

    @property
    def items(self) -> Sequence[Entry[K]]:
        return self._items

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def displayed(self) -> FilterResult[K]:
        return self._displayed

    @property
    def highlighted(self) -> int | None:
        """Position of the focused row in ``displayed``, None when it is empty."""
        return self._highlighted

    @property
    def highlighted_entry(self) -> Entry[K] | None:
        if self._highlighted is None:
            return None
        return self._displayed[self._highlighted]

    @property
    def selected_keys(self) -> frozenset[K]:
        return frozenset(self._selected)

    @property
    def exit_requested(self) -> bool:
        return self._exit

    def is_selected(self, key: K) -> bool:
        return key in self._selected

    def result(self) -> list[K]:
        """Return the selected keys in ascending order."""
        return sorted(self._selected)  # type: ignore[type-var]

    def handle(self, event: KeyEvent) -> None:
        """Apply one key event; release and repeat events are ignored."""
        if event.kind is not KeyEventKind.PRESS or self._exit:
            return
        handler = self._handlers.get(event.action)
        if handler is None:
            return
        handler(event)

    def feed(self, events: Sequence[KeyEvent]) -> None:
        """Apply events in order, stopping once the exit flag is set."""
        for event in events:
            if self._exit:
                break
            self.handle(event)

    def _refresh(self) -> None:
        self._displayed = filter_entries(
            self._items, self._search_text, self._options.default_list
        )
        self._highlighted = 0 if self._displayed else None

    def _cancel(self, _event: KeyEvent) -> None:
        self._selected.clear()
        self._exit = True
        logger.debug("Selection cancelled")

    def _confirm(self, _event: KeyEvent) -> None:
        self._exit = True
        if self._options.multi_select:
            return
        entry = self.highlighted_entry
        if entry is None:
            return
        self._selected = {entry.key: None}

    def _insert(self, event: KeyEvent) -> None:
        if not event.char:
            return
        self._search_text += event.char
        self._refresh()

    def _erase(self, _event: KeyEvent) -> None:
        self._search_text = self._search_text[:-1]
        self._refresh()

    def _move(self, delta: int) -> None:
        if self._highlighted is None:
            return
        last = len(self._displayed) - 1
        self._highlighted = max(0, min(self._highlighted + delta, last))

    def _toggle_all(self, _event: KeyEvent) -> None:
        if not self._options.multi_select:
            return
        keys = self._displayed.keys()
        if any(key in self._selected for key in keys):
            for key in keys:
                self._selected.pop(key, None)
        else:
            for key in keys:
                self._selected[key] = None

    def _toggle_one(self, _event: KeyEvent) -> None:
        if not self._options.multi_select:
            return
        entry = self.highlighted_entry
        if entry is None:
            return
        if entry.key in self._selected:
            del self._selected[entry.key]
        else:
            self._selected[entry.key] = None
