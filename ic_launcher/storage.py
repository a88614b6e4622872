"""Load and save launcher state files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Generic, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ic_common.errors import RegistryError, SourceError
from ic_launcher.models import CommandsSource

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class OnDisk(Generic[M]):
    """A pydantic model paired with the JSON file it is persisted to."""

    def __init__(self, path: Path, inner: M) -> None:
        self.path = path
        self.inner = inner

    @classmethod
    def new_from_default(cls, path: Path, model: Type[M]) -> "OnDisk[M]":
        return cls(path, model())

    @classmethod
    def open_or_default(cls, path: Path, model: Type[M]) -> "OnDisk[M]":
        """Load ``path``; a missing or blank file yields the model defaults."""
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No state file at %s, using defaults", path)
            return cls.new_from_default(path, model)
        except OSError as exc:
            raise RegistryError(
                f"Cannot read {path}", path=path, cause=exc
            ) from exc

        if not content.strip():
            return cls.new_from_default(path, model)
        try:
            inner = model.model_validate_json(content)
        except ValidationError as exc:
            raise RegistryError(
                f"Invalid content in {path}; purge it with `iforgor --purge-all`",
                path=path,
                cause=exc,
            ) from exc
        return cls(path, inner)

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.inner.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise RegistryError(
                f"Cannot write {self.path}", path=self.path, cause=exc
            ) from exc
        logger.debug("Saved %s", self.path)


def read_commands_source(path: Path) -> CommandsSource:
    """Parse a TOML commands source file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SourceError(
            f"Cannot read source {path}", path=path, cause=exc
        ) from exc
    except tomllib.TOMLDecodeError as exc:
        raise SourceError(
            f"Invalid TOML in source {path}: {exc}", path=path, cause=exc
        ) from exc
    try:
        return CommandsSource.model_validate(data)
    except ValidationError as exc:
        raise SourceError(
            f"Invalid entries in source {path}", path=path, cause=exc
        ) from exc
