"""Store error taxonomy.

Every failure leaving a store is a StoreError whose ``kind`` tells the
caller whether the disk failed or the post file was malformed.
"""

from __future__ import annotations

import errno
from enum import StrEnum
from pathlib import Path


class ErrorKind(StrEnum):
    """Closed set of store failure kinds."""

    IO = "io"
    MISSING_HEADER = "missing_header"


class StoreError(Exception):
    """Base class for post store failures."""

    kind: ErrorKind

    def __init__(self, message: str, *, slug: str | None = None):
        super().__init__(message)
        self.message = message
        self.slug = slug


class StoreIOError(StoreError):
    """An underlying filesystem call failed."""

    kind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        *,
        slug: str | None = None,
        path: Path | None = None,
        not_found: bool = False,
    ):
        super().__init__(message, slug=slug)
        self.path = path
        self.not_found = not_found

    @classmethod
    def from_os_error(
        cls, exc: OSError, *, slug: str | None = None, path: Path | None = None
    ) -> StoreIOError:
        """Build from an OSError; the caller chains it with ``raise ... from``."""
        reason = exc.strerror or str(exc)
        target = path if path is not None else exc.filename
        return cls(
            f"{reason}: {target}" if target is not None else reason,
            slug=slug,
            path=path,
            not_found=isinstance(exc, FileNotFoundError)
            or exc.errno == errno.ENOENT,
        )


class MissingHeader(StoreError):
    """A post file has no parseable front matter header."""

    kind = ErrorKind.MISSING_HEADER


__all__ = ["ErrorKind", "MissingHeader", "StoreError", "StoreIOError"]
