"""Registry, history and commands-source models for the iforgor launcher."""

from __future__ import annotations

import hashlib
import platform
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

CommandId = str


class Shell(str, Enum):
    SH = "Sh"
    BASH = "Bash"
    POWERSHELL = "Powershell"
    CMD = "Cmd"


class Platform(str, Enum):
    LINUX = "Linux"
    WINDOWS = "Windows"
    MACOS = "MacOS"

    @classmethod
    def current(cls) -> Optional["Platform"]:
        return _PLATFORM_BY_SYSTEM.get(platform.system())


_PLATFORM_BY_SYSTEM = {
    "Linux": Platform.LINUX,
    "Windows": Platform.WINDOWS,
    "Darwin": Platform.MACOS,
}


class UserCommand(BaseModel):
    """A named script the user registered through a commands source."""

    name: str
    script: str
    args: List[str] = Field(
        default_factory=list, description="Prompt labels for positional arguments"
    )
    shell: Shell = Field(default=Shell.SH, description="Interpreter used to run the script")
    only_on: Optional[Platform] = Field(
        default=None, description="Restrict the command to one platform"
    )
    risky: bool = Field(default=False, description="Ask for confirmation before running")

    model_config = ConfigDict(extra="ignore")

    def generate_id(self) -> CommandId:
        """Stable id derived from the script text (hex SHA3-256)."""
        return hashlib.sha3_256(self.script.encode("utf-8")).hexdigest()

    def available_on(self, current: Optional[Platform]) -> bool:
        return self.only_on is None or self.only_on == current


class CommandsSource(BaseModel):
    """Content of a user-maintained TOML file listing ``[[entries]]``."""

    entries: List[UserCommand] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class Registry(BaseModel):
    sources: Set[Path] = Field(default_factory=set)
    commands: Dict[CommandId, UserCommand] = Field(default_factory=dict)


class History(BaseModel):
    """Ids of commands that were run, oldest first, without duplicates."""

    history: List[CommandId] = Field(default_factory=list)

    def record(self, command_id: CommandId) -> None:
        self.history = [hid for hid in self.history if hid != command_id]
        self.history.append(command_id)

    def most_recent_first(self) -> List[CommandId]:
        return list(reversed(self.history))
