"""Shared test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from blogstore.core.types import Post, StoreCallbacks, StoreEvent
from blogstore.storage import FilePostStore, InMemoryPostStore, set_store

SAMPLE_POSTS = {
    "sample1": "---\ntitle: sample 1\n---\nhello\n",
    "sample2": "---\ntitle: sample 2\n---\nThis is the second sample post.\n",
}


@pytest.fixture(autouse=True)
def reset_default_store():
    """Drop any default store a test installed."""
    yield
    set_store(None)


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    """Posts directory seeded with sample1.md and sample2.md."""
    path = tmp_path / "posts"
    path.mkdir()
    for slug, text in SAMPLE_POSTS.items():
        (path / f"{slug}.md").write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def empty_posts_dir(tmp_path: Path) -> Path:
    """Empty posts directory."""
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def events() -> list[StoreEvent]:
    """Collects events emitted through store callbacks."""
    return []


@pytest.fixture
def callbacks(events: list[StoreEvent]) -> StoreCallbacks:
    """Store callbacks recording into ``events``."""
    return StoreCallbacks(on_event=events.append)


@pytest.fixture
def file_store(posts_dir: Path) -> FilePostStore:
    """File store over the seeded posts directory."""
    return FilePostStore(posts_dir)


@pytest.fixture
def memory_store() -> InMemoryPostStore:
    """In-memory store seeded with the sample posts."""
    store = InMemoryPostStore()
    for slug, text in SAMPLE_POSTS.items():
        store.put_raw(slug, text)
    return store


@pytest.fixture
def sample_post() -> Post:
    """A post not present in the seeded stores."""
    return Post(title="Sample Post 3", slug="sample3", content="a test body")
