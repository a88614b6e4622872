"""Launcher use cases: sources, registry reloads, history and running commands."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from ic_common.config.env import resolve_path_env
from ic_common.errors import RegistryError, SourceError
from ic_launcher.execution import ScriptResult, ScriptRunner
from ic_launcher.models import (
    CommandId,
    History,
    Platform,
    Registry,
    UserCommand,
)
from ic_launcher.storage import OnDisk, read_commands_source

logger = logging.getLogger(__name__)

APP_DIR_ENV = "IFORGOR_HOME"


class Prompter(Protocol):
    def ask(self, label: str) -> str: ...
    def confirm(self, message: str) -> bool: ...
    def info(self, message: str) -> None: ...
    def pause(self, message: str) -> None: ...


@dataclass(frozen=True)
class LauncherPaths:
    app_dir: Path

    @property
    def registry(self) -> Path:
        return self.app_dir / "registry.json"

    @property
    def history(self) -> Path:
        return self.app_dir / "history.json"

    @classmethod
    def from_env(cls) -> "LauncherPaths":
        default = Path.home() / ".iforgor"
        return cls(resolve_path_env(os.environ.get(APP_DIR_ENV), default))


class LauncherService:
    def __init__(
        self,
        paths: LauncherPaths,
        *,
        runner: ScriptRunner | None = None,
        platform: Optional[Platform] = None,
    ) -> None:
        self.paths = paths
        self.runner = runner or ScriptRunner()
        self._platform = platform if platform is not None else Platform.current()
        self._registry: OnDisk[Registry] | None = None
        self._history: OnDisk[History] | None = None

    @property
    def registry(self) -> Registry:
        return self._registry_file().inner

    @property
    def history(self) -> History:
        return self._history_file().inner

    def _registry_file(self) -> OnDisk[Registry]:
        if self._registry is None:
            self._registry = OnDisk.open_or_default(self.paths.registry, Registry)
        return self._registry

    def _history_file(self) -> OnDisk[History]:
        if self._history is None:
            self._history = OnDisk.open_or_default(self.paths.history, History)
        return self._history

    def save(self) -> None:
        self._registry_file().save()
        self._history_file().save()

    def save_history(self) -> None:
        self._history_file().save()

    def purge_all(self) -> None:
        self._registry = OnDisk.new_from_default(self.paths.registry, Registry)
        self._history = OnDisk.new_from_default(self.paths.history, History)
        self.save()

    def purge_history(self) -> None:
        self._history = OnDisk.new_from_default(self.paths.history, History)
        self.save_history()

    def load_source(self, path: Path) -> dict[CommandId, UserCommand]:
        """Read commands from one source, skipping those meant for another platform."""
        commands: dict[CommandId, UserCommand] = {}
        for command in read_commands_source(path).entries:
            if not command.available_on(self._platform):
                logger.info("Skipping %r: only available on %s", command.name, command.only_on)
                continue
            commands[command.generate_id()] = command
        return commands

    def add_source(self, path: Path) -> tuple[Path, list[UserCommand]]:
        """Register ``path`` and merge its commands; returns the canonical path."""
        try:
            canonical = path.resolve(strict=True)
        except OSError as exc:
            raise SourceError(
                f"Source not found: {path}", path=path, cause=exc
            ) from exc
        commands = self.load_source(canonical)
        self.registry.commands.update(commands)
        self.registry.sources.add(canonical)
        return canonical, list(commands.values())

    def list_sources(self) -> list[Path]:
        return sorted(self.registry.sources)

    def remove_source(self, path: Path) -> Path:
        """Unregister a source, trying the raw path before the canonical one.

        Matching the raw path lets users drop sources deleted from disk. The
        source's commands stay registered until the next ``reload``.
        """
        sources = self.registry.sources
        if path in sources:
            sources.remove(path)
            return path
        try:
            canonical = path.resolve(strict=True)
        except OSError as exc:
            raise RegistryError(
                "Path was not a registered source", path=path, cause=exc
            ) from exc
        if canonical not in sources:
            raise RegistryError("Path was not a registered source", path=path)
        sources.remove(canonical)
        return canonical

    def reload(self) -> int:
        """Rebuild the command set from every registered source."""
        commands: dict[CommandId, UserCommand] = {}
        for source in self.list_sources():
            commands.update(self.load_source(source))
        self.registry.commands = commands
        logger.info("Reloaded %d commands from %d sources", len(commands), len(self.registry.sources))
        return len(commands)

    def entries(self) -> list[tuple[CommandId, str]]:
        """(id, name) pairs for every registered command."""
        return [
            (command_id, command.name)
            for command_id, command in self.registry.commands.items()
        ]

    def history_entries(self) -> list[tuple[CommandId, str]]:
        """Most recent first; ids no longer in the registry are dropped."""
        commands = self.registry.commands
        return [
            (command_id, commands[command_id].name)
            for command_id in self.history.most_recent_first()
            if command_id in commands
        ]

    def get_command(self, command_id: CommandId) -> UserCommand:
        try:
            return self.registry.commands[command_id]
        except KeyError as exc:
            raise RegistryError(
                f"Unknown command ID {command_id}", command_id=command_id, cause=exc
            ) from exc

    def run_command(self, command_id: CommandId, prompter: Prompter) -> ScriptResult | None:
        """Run a registered command; returns None when a risky run is declined."""
        command = self.get_command(command_id)
        if command.risky and not prompter.confirm(
            f"\"{command.name}\" is marked as risky, run it anyway?"
        ):
            return None

        self.history.record(command_id)

        if command.args:
            prompter.info(
                "This script requires the following arguments (use Ctrl+C to abort execution):"
            )
        values = [prompter.ask(f"- {arg}") for arg in command.args]

        prompter.info(f"💭 Running \"{command.name}\"\n")
        return self.runner.run(command.script, values, shell=command.shell)
