"""Ctrl+C handling while the launcher hands the terminal to a child script."""

from __future__ import annotations

import logging
import signal
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class InterruptMode(str, Enum):
    IGNORE = "ignore"
    KILL = "kill"


def _swallow_interrupt(signum: int, frame: Any) -> None:
    logger.debug("Interrupt ignored while a child script owns the terminal")


@dataclass
class InterruptPolicy:
    """Caller-owned SIGINT policy handed to whatever spawns child scripts.

    In IGNORE mode a no-op Python handler is installed instead of SIG_IGN:
    exec resets caught signals to their default, so the child can still be
    interrupted while the launcher survives the same Ctrl+C.
    """

    mode: InterruptMode = InterruptMode.KILL
    _saved_handler: Any = field(default=None, init=False, repr=False)

    def set_mode(self, mode: InterruptMode) -> None:
        if mode is self.mode:
            return
        if mode is InterruptMode.IGNORE:
            self._saved_handler = signal.signal(signal.SIGINT, _swallow_interrupt)
        else:
            previous = self._saved_handler
            if previous is None:
                previous = signal.default_int_handler
            signal.signal(signal.SIGINT, previous)
            self._saved_handler = None
        self.mode = mode

    @contextmanager
    def ignoring(self) -> Iterator[None]:
        """Ignore Ctrl+C inside the block, restoring the previous mode after."""
        previous = self.mode
        self.set_mode(InterruptMode.IGNORE)
        try:
            yield
        finally:
            self.set_mode(previous)
