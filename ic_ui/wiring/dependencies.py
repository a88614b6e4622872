from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ic_common.api import configure_logging
from ic_launcher.api import InterruptPolicy, LauncherPaths, LauncherService, ScriptRunner
from ic_ui.tui.system.facade import TerminalChooser
from ic_ui.tui.system.protocols import Chooser


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""

    headless: bool = False
    interrupts: InterruptPolicy = field(default_factory=InterruptPolicy)

    _chooser: Optional[Chooser] = None
    _launcher: Optional[LauncherService] = None

    @property
    def chooser(self) -> Chooser:
        if self._chooser is None:
            if self.headless:
                from ic_ui.tui.system.headless import HeadlessChooser

                self._chooser = HeadlessChooser()
            else:
                self._chooser = TerminalChooser()
        return self._chooser

    @chooser.setter
    def chooser(self, value: Chooser) -> None:
        self._chooser = value

    @property
    def launcher(self) -> LauncherService:
        if self._launcher is None:
            self._launcher = LauncherService(
                LauncherPaths.from_env(),
                runner=ScriptRunner(interrupts=self.interrupts),
            )
        return self._launcher

    @launcher.setter
    def launcher(self, value: LauncherService) -> None:
        self._launcher = value


__all__ = [
    "UIContext",
    "configure_logging",
]
