from __future__ import annotations

import logging
import sys
from typing import Sequence

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.output import Output, create_output

from ic_ui.tui.screens.search_screen import SearchScreen
from ic_ui.tui.system.components.selection_session import SelectionSession
from ic_ui.tui.system.models import Entry, K, SessionOptions
from ic_ui.tui.system.protocols import Chooser

logger = logging.getLogger(__name__)


class TerminalChooser(Chooser):
    """Interactive chooser drawing on stderr so stdout stays free for results.

    Keys are read from the controlling terminal even when stdin is a pipe,
    which is how ``ichoose`` receives its entries.
    """

    def __init__(self, *, input: Input | None = None, output: Output | None = None) -> None:
        self._input = input
        self._output = output

    def choose(
        self,
        items: Sequence[Entry[K]],
        options: SessionOptions[K] | None = None,
    ) -> list[K]:
        session = SelectionSession(items, options)
        logger.debug(
            "Starting selection over %d items (multi=%s)",
            len(items),
            session.options.multi_select,
        )
        screen = SearchScreen(
            session,
            input=self._input or create_input(always_prefer_tty=True),
            output=self._output or create_output(stdout=sys.stderr),
        )
        result = screen.run()
        logger.debug("Selection finished with %d keys", len(result))
        return result
