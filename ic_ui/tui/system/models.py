from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Hashable, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class Entry(Generic[K]):
    """One selectable item: an opaque, ordered key and its display name."""

    key: K
    name: str


@dataclass(frozen=True)
class SessionOptions(Generic[K]):
    title: str = " ichoose "
    text: str = ""
    multi_select: bool = False
    # Shown verbatim instead of the filtered items while the search is empty.
    default_list: Sequence[Entry[K]] | None = None


class KeyAction(Enum):
    CANCEL = auto()
    CONFIRM = auto()
    INSERT = auto()
    ERASE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    TOGGLE_ALL = auto()
    TOGGLE_ONE = auto()
    IGNORED = auto()


class KeyEventKind(Enum):
    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    action: KeyAction
    char: str = ""
    kind: KeyEventKind = KeyEventKind.PRESS

    @classmethod
    def insert(cls, char: str) -> "KeyEvent":
        return cls(KeyAction.INSERT, char=char)

    @classmethod
    def typed(cls, text: str) -> list["KeyEvent"]:
        """Return one INSERT event per character of ``text``."""
        return [cls.insert(char) for char in text]
