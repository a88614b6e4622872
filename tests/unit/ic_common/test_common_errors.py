"""Tests for the shared error types."""

from __future__ import annotations

from pathlib import Path

import pytest

from ic_common.errors import (
    ICError,
    RegistryError,
    ScriptExecutionError,
    SelectionContractError,
    SourceError,
    TerminalIOError,
)


pytestmark = pytest.mark.unit_common


def test_terminal_error_keeps_session_position_and_cause() -> None:
    cause = OSError("gone")
    err = TerminalIOError("tty lost", search_text="gam", highlighted=0, cause=cause)

    assert isinstance(err, ICError)
    assert err.__cause__ is cause
    assert err.to_dict() == {
        "type": "TerminalIOError",
        "message": "tty lost",
        "search_text": "gam",
        "highlighted": 0,
    }


def test_registry_error_reports_only_known_fields() -> None:
    assert RegistryError("bad").to_dict() == {"type": "RegistryError", "message": "bad"}

    err = RegistryError("unknown", command_id="abc", path=Path("/tmp/registry.json"))
    assert err.to_dict()["command_id"] == "abc"
    assert err.to_dict()["path"].endswith("registry.json")


def test_path_and_command_details_are_plain_strings() -> None:
    source = SourceError("bad toml", path=Path("commands.toml"))
    script = ScriptExecutionError("no pwsh", command=("pwsh", Path("script.ps1")))

    assert source.to_dict()["path"] == "commands.toml"
    assert script.command == ["pwsh", Path("script.ps1")]
    assert SelectionContractError("two keys", choices=[1, 2]).to_dict()["choices"] == ["1", "2"]
