from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ic_ui.tui.system.components.selection_session import SelectionSession
from ic_ui.tui.system.models import Entry, K, KeyAction, KeyEvent, SessionOptions
from ic_ui.tui.system.protocols import Chooser


@dataclass
class RecordedSession:
    items: list[Entry]
    options: SessionOptions
    result: list


@dataclass
class HeadlessChooser(Chooser):
    """Chooser that replays scripted key events through a real session.

    Each call to ``choose`` consumes the next script from ``scripts``; once
    they run out every session is cancelled. A script that never confirms or
    cancels is confirmed after its last event.
    """

    scripts: list[Sequence[KeyEvent]] = field(default_factory=list)
    recorded_sessions: list[RecordedSession] = field(default_factory=list)

    def choose(
        self,
        items: Sequence[Entry[K]],
        options: SessionOptions[K] | None = None,
    ) -> list[K]:
        session = SelectionSession(items, options)
        script: Sequence[KeyEvent] = (
            self.scripts.pop(0) if self.scripts else [KeyEvent(KeyAction.CANCEL)]
        )
        session.feed(script)
        if not session.exit_requested:
            session.handle(KeyEvent(KeyAction.CONFIRM))
        result = session.result()
        self.recorded_sessions.append(
            RecordedSession(items=list(items), options=session.options, result=result)
        )
        return result
