"""Run user scripts from a temporary executable file."""

from __future__ import annotations

import logging
import stat
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ic_common.errors import ScriptExecutionError
from ic_launcher.interrupts import InterruptPolicy
from ic_launcher.models import Shell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptLayout:
    """How a script for a given shell is written and launched."""

    filename: str
    header: str
    launcher: tuple[str, ...] = ()
    executable: bool = True


SCRIPT_LAYOUTS: dict[Shell, ScriptLayout] = {
    Shell.SH: ScriptLayout(filename="script", header="#!/bin/sh\n"),
    Shell.BASH: ScriptLayout(filename="script", header="#!/usr/bin/env bash\n"),
    Shell.POWERSHELL: ScriptLayout(
        filename="script.ps1",
        header="",
        launcher=("pwsh", "-NoProfile", "-File"),
        executable=False,
    ),
    Shell.CMD: ScriptLayout(
        filename="script.bat",
        header="@echo off\n",
        launcher=("cmd", "/C"),
        executable=False,
    ),
}


@dataclass(frozen=True)
class ScriptResult:
    returncode: int

    @property
    def signal(self) -> int | None:
        """Signal number when the script was killed by one (POSIX only)."""
        return -self.returncode if self.returncode < 0 else None

    def describe(self) -> str:
        if self.signal is not None:
            return "Execution terminated by signal"
        return f"Execution complete with code {self.returncode}"


def write_script(directory: Path, script: str, shell: Shell) -> Path:
    """Write ``script`` under ``directory`` and make it owner read/execute."""
    layout = SCRIPT_LAYOUTS[shell]
    path = directory / layout.filename
    path.write_text(layout.header + script, encoding="utf-8")
    if layout.executable:
        path.chmod(stat.S_IRUSR | stat.S_IXUSR)
    return path


def build_command(path: Path, shell: Shell, args: Sequence[str]) -> list[str]:
    layout = SCRIPT_LAYOUTS[shell]
    return [*layout.launcher, str(path), *args]


@dataclass
class ScriptRunner:
    """Spawn a script and wait for it with Ctrl+C left to the child."""

    interrupts: InterruptPolicy = field(default_factory=InterruptPolicy)

    def run(self, script: str, args: Sequence[str] = (), shell: Shell = Shell.SH) -> ScriptResult:
        with tempfile.TemporaryDirectory(prefix="iforgor-") as tmp:
            path = write_script(Path(tmp), script, shell)
            command = build_command(path, shell, args)
            logger.debug("Running %s", command)
            try:
                with self.interrupts.ignoring():
                    completed = subprocess.run(command, check=False)
            except OSError as exc:
                raise ScriptExecutionError(
                    f"Failed to start script with {shell.value}",
                    command=command,
                    cause=exc,
                ) from exc
        return ScriptResult(returncode=completed.returncode)
