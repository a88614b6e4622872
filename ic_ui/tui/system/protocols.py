from typing import Protocol, Sequence

from ic_ui.tui.system.models import Entry, K, SessionOptions


class Chooser(Protocol):
    def choose(
        self,
        items: Sequence[Entry[K]],
        options: SessionOptions[K] | None = None,
    ) -> list[K]: ...
