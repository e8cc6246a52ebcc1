"""blogstore core - post types, errors and configuration."""

from blogstore.core.errors import ErrorKind, MissingHeader, StoreError, StoreIOError
from blogstore.core.types import (
    OnStoreEvent,
    Post,
    StoreCallbacks,
    StoreEvent,
    StoreOperation,
)

__all__ = [
    # Types
    "OnStoreEvent",
    "Post",
    "StoreCallbacks",
    "StoreEvent",
    "StoreOperation",
    # Errors
    "ErrorKind",
    "MissingHeader",
    "StoreError",
    "StoreIOError",
]
