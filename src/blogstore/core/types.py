"""Shared types and data structures for blogstore."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel


class Post(BaseModel, frozen=True):
    """A blog post.

    The slug is the post's identity and the stem of its file name; it is
    never written into the file itself.
    """

    title: str
    slug: str
    content: str


class StoreOperation(StrEnum):
    """Operations a post store can report through its callbacks."""

    CREATE = "create"
    READ = "read"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class StoreEvent:
    """Record of a completed store operation."""

    operation: StoreOperation
    slug: str | None = None
    path: Path | None = None


class OnStoreEvent(Protocol):
    """Callback signature for store event notifications."""

    def __call__(self, event: StoreEvent) -> None:
        pass


@dataclass(frozen=True)
class StoreCallbacks:
    """Optional hooks injected into a store. None = feature disabled."""

    on_event: OnStoreEvent | None = None
    """Called after each successful operation. Sync."""

    def emit(self, event: StoreEvent) -> None:
        """Forward an event to the hook if one is set."""
        if self.on_event is not None:
            self.on_event(event)


__all__ = [
    "OnStoreEvent",
    "Post",
    "StoreCallbacks",
    "StoreEvent",
    "StoreOperation",
]
