from __future__ import annotations

import logging
from typing import NoReturn

import typer
from rich.console import Console

from ic_common.errors import ICError
from ic_ui.tui.core import theme

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def exit_with_error(error: ICError, exit_code: int = 1) -> NoReturn:
    """Report a typed failure on stderr and stop the command."""
    logger.debug("Command failed: %s", error.to_dict())
    err_console.print(theme.error_message(str(error)), highlight=False)
    raise typer.Exit(exit_code)
