"""Storage layer for blogstore - post stores and the front matter codec."""

from pathlib import Path
from threading import Lock

from blogstore.core.config import get_posts_dir
from blogstore.storage.base import PostStore
from blogstore.storage.file_store import FilePostStore
from blogstore.storage.frontmatter import (
    PostFrontmatter,
    decode_post,
    encode_post,
    parse_frontmatter,
    write_frontmatter,
)
from blogstore.storage.memory_store import InMemoryPostStore


def build_store(posts_dir: Path | str | None = None) -> PostStore:
    """
    Build a file post store.

    Args:
        posts_dir: Directory holding post files (defaults to BLOGSTORE_POSTS_DIR)
    """
    return FilePostStore(posts_dir if posts_dir is not None else get_posts_dir())


_store: PostStore | None = None
_store_lock = Lock()


def get_store() -> PostStore:
    """Get or create the default store instance."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = build_store()
    return _store


def set_store(store: PostStore | None) -> None:
    """Set the default store instance (None rebuilds it on next use)."""
    global _store
    _store = store


__all__ = [
    "FilePostStore",
    "InMemoryPostStore",
    "PostFrontmatter",
    "PostStore",
    "build_store",
    "decode_post",
    "encode_post",
    "get_store",
    "parse_frontmatter",
    "set_store",
    "write_frontmatter",
]
