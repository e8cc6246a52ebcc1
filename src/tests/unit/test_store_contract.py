"""Behaviour every PostStore variant must share."""

import pytest

from blogstore.core.errors import MissingHeader, StoreError, StoreIOError
from blogstore.core.types import Post
from blogstore.storage import FilePostStore, InMemoryPostStore, PostStore


@pytest.fixture(params=["file", "memory"])
def store(request) -> PostStore:
    """Each store variant, seeded with sample1 and sample2."""
    return request.getfixturevalue(f"{request.param}_store")


def test_store_satisfies_protocol(store):
    """Variants are usable wherever a PostStore is expected."""
    assert isinstance(store, PostStore)


def test_create_read_delete(store, sample_post):
    """Created posts read back identically and are gone after delete."""
    with pytest.raises(StoreIOError):
        store.read_post("sample3")

    assert store.create_post(sample_post) == sample_post
    assert store.read_post("sample3") == sample_post

    store.delete_post("sample3")

    with pytest.raises(StoreIOError) as exc_info:
        store.read_post("sample3")
    assert exc_info.value.not_found


def test_read_existing_post(store):
    """Seeded posts decode with the slug taken from their key."""
    assert store.read_post("sample1") == Post(
        title="sample 1", slug="sample1", content="hello"
    )


def test_list_contains_exactly_stored_slugs(store):
    """List returns each stored slug once; order is not asserted."""
    assert sorted(store.list_posts()) == ["sample1", "sample2"]


def test_list_after_creates(store):
    """New slugs show up in the listing."""
    for i in range(3, 6):
        store.create_post(Post(title=f"t{i}", slug=f"post{i}", content="x"))

    assert set(store.list_posts()) == {
        "sample1",
        "sample2",
        "post3",
        "post4",
        "post5",
    }


def test_content_is_trimmed_on_round_trip(store):
    """Surrounding whitespace in the body is not preserved."""
    store.create_post(Post(title="t", slug="spaced", content="\n\n  body  \n"))

    assert store.read_post("spaced").content == "body"


@pytest.mark.parametrize("content", ["a\r\nb", "a\rb", "a\r\n\r\nb\nc"])
def test_line_endings_in_body_survive(store, content):
    """Carriage returns inside the body are stored verbatim."""
    post = Post(title="t", slug="endings", content=content)

    store.create_post(post)

    assert store.read_post("endings") == post


def test_update_then_restore(store):
    """Update is visible on read and can be reverted."""
    original = store.read_post("sample2")
    assert original.content != "hoge"

    updated = Post(title=original.title, slug=original.slug, content="hoge")
    assert store.update_post(updated) == updated
    assert store.read_post("sample2") == updated

    assert store.update_post(original) == original
    assert store.read_post("sample2") == original


def test_update_twice_is_same_as_once(store):
    """Repeating an update does not change the outcome."""
    post = Post(title="new title", slug="sample1", content="new body")

    store.update_post(post)
    once = store.read_post("sample1")
    store.update_post(post)

    assert store.read_post("sample1") == once == post


def test_update_missing_post_fails_without_creating(store):
    """Update never creates a post."""
    with pytest.raises(StoreIOError) as exc_info:
        store.update_post(Post(title="t", slug="ghost", content="boo"))

    assert exc_info.value.not_found
    assert "ghost" not in store.list_posts()


def test_create_overwrites_existing_post(store):
    """Create on an existing slug replaces it silently."""
    replacement = Post(title="replaced", slug="sample1", content="new")

    store.create_post(replacement)

    assert store.read_post("sample1") == replacement
    assert sorted(store.list_posts()) == ["sample1", "sample2"]


def test_delete_missing_post_fails(store):
    """Deleting an unknown slug raises StoreIOError."""
    with pytest.raises(StoreIOError):
        store.delete_post("ghost")


def test_store_errors_share_a_base(store):
    """Callers can catch every store failure with StoreError."""
    with pytest.raises(StoreError) as exc_info:
        store.read_post("ghost")

    assert exc_info.value.kind == "io"
    assert exc_info.value.slug == "ghost"


def test_callbacks_receive_events(callbacks, events, posts_dir):
    """Both variants report completed operations to the hook."""
    for store in (FilePostStore(posts_dir, callbacks), InMemoryPostStore(callbacks)):
        events.clear()
        post = Post(title="t", slug="hooked", content="x")

        store.create_post(post)
        store.read_post("hooked")
        store.list_posts()
        store.update_post(post)
        store.delete_post("hooked")

        assert [e.operation for e in events] == [
            "create",
            "read",
            "list",
            "update",
            "delete",
        ]
        assert events[0].slug == "hooked"


def test_failed_operations_emit_no_event(callbacks, events, tmp_path):
    """Only successful operations are reported."""
    store = FilePostStore(tmp_path / "missing", callbacks)

    with pytest.raises(StoreIOError):
        store.list_posts()
    with pytest.raises(StoreIOError):
        store.read_post("x")

    assert events == []


def test_memory_store_missing_header():
    """Raw text without a header fails with MissingHeader."""
    store = InMemoryPostStore()
    store.put_raw("broken", "just a body")

    with pytest.raises(MissingHeader):
        store.read_post("broken")
