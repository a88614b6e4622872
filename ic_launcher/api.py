"""Public API surface for ic_launcher."""

from ic_launcher.execution import ScriptResult, ScriptRunner
from ic_launcher.interrupts import InterruptMode, InterruptPolicy
from ic_launcher.models import (
    CommandId,
    CommandsSource,
    History,
    Platform,
    Registry,
    Shell,
    UserCommand,
)
from ic_launcher.service import LauncherPaths, LauncherService, Prompter
from ic_launcher.storage import OnDisk, read_commands_source

__all__ = [
    "CommandId",
    "CommandsSource",
    "History",
    "InterruptMode",
    "InterruptPolicy",
    "LauncherPaths",
    "LauncherService",
    "OnDisk",
    "Platform",
    "Prompter",
    "Registry",
    "ScriptResult",
    "ScriptRunner",
    "Shell",
    "UserCommand",
    "read_commands_source",
]
