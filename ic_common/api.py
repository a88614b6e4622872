"""Public API surface for ic_common."""

from ic_common.errors import (
    ICError,
    RegistryError,
    ScriptExecutionError,
    SelectionContractError,
    SourceError,
    TerminalIOError,
)
from ic_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ICError",
    "RegistryError",
    "ScriptExecutionError",
    "SelectionContractError",
    "SourceError",
    "TerminalIOError",
]
