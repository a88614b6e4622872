"""Typed failures reported by the ichoose and iforgor front-ends.

Each error keeps the few fields that explain it (a path, a command line,
the search text) as attributes; ``to_dict`` flattens them for the debug log.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence


class ICError(Exception):
    """Base error the command-line front-ends print and exit on."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {"type": type(self).__name__, "message": str(self), **self.details()}


class TerminalIOError(ICError):
    """Reading a key or drawing a frame failed; the terminal is already restored."""

    def __init__(
        self,
        message: str,
        *,
        search_text: str = "",
        highlighted: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.search_text = search_text
        self.highlighted = highlighted

    def details(self) -> dict[str, Any]:
        return {"search_text": self.search_text, "highlighted": self.highlighted}


class SelectionContractError(ICError):
    """A single-select chooser returned more than one key."""

    def __init__(self, message: str, *, choices: Sequence[Any]) -> None:
        super().__init__(message)
        self.choices = list(choices)

    def details(self) -> dict[str, Any]:
        return {"choices": [str(choice) for choice in self.choices]}


class RegistryError(ICError):
    """The launcher state files or the registered sources are unusable."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        command_id: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path
        self.command_id = command_id

    def details(self) -> dict[str, Any]:
        found: dict[str, Any] = {}
        if self.path is not None:
            found["path"] = str(self.path)
        if self.command_id is not None:
            found["command_id"] = self.command_id
        return found


class SourceError(ICError):
    """A TOML commands source cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path

    def details(self) -> dict[str, Any]:
        return {"path": str(self.path)}


class ScriptExecutionError(ICError):
    """The interpreter for a user script could not be started."""

    def __init__(
        self, message: str, *, command: Sequence[str], cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.command = list(command)

    def details(self) -> dict[str, Any]:
        return {"command": [str(part) for part in self.command]}
