"""In-memory post store.

Keeps encoded post text keyed by slug so it goes through the same front
matter codec as the file store. Useful in tests and for wiring the API
without a posts directory.
"""

from blogstore.core.errors import StoreIOError
from blogstore.core.types import Post, StoreCallbacks, StoreEvent, StoreOperation
from blogstore.storage.frontmatter import decode_post, encode_post


class InMemoryPostStore:
    """Post store over a dict of slug -> encoded text."""

    def __init__(self, callbacks: StoreCallbacks | None = None):
        self._posts: dict[str, str] = {}
        self.callbacks = callbacks or StoreCallbacks()

    def _missing(self, slug: str) -> StoreIOError:
        return StoreIOError(f"No such post: {slug}", slug=slug, not_found=True)

    def put_raw(self, slug: str, text: str) -> None:
        """Store raw file text for ``slug`` without encoding it."""
        self._posts[slug] = text

    def create_post(self, post: Post) -> Post:
        self._posts[post.slug] = encode_post(post)
        self.callbacks.emit(StoreEvent(StoreOperation.CREATE, post.slug))
        return post

    def read_post(self, slug: str) -> Post:
        try:
            text = self._posts[slug]
        except KeyError:
            raise self._missing(slug) from None
        post = decode_post(text, slug)
        self.callbacks.emit(StoreEvent(StoreOperation.READ, slug))
        return post

    def list_posts(self) -> list[str]:
        self.callbacks.emit(StoreEvent(StoreOperation.LIST))
        return list(self._posts)

    def update_post(self, post: Post) -> Post:
        if post.slug not in self._posts:
            raise self._missing(post.slug)
        self._posts[post.slug] = encode_post(post)
        self.callbacks.emit(StoreEvent(StoreOperation.UPDATE, post.slug))
        return post

    def delete_post(self, slug: str) -> None:
        try:
            del self._posts[slug]
        except KeyError:
            raise self._missing(slug) from None
        self.callbacks.emit(StoreEvent(StoreOperation.DELETE, slug))
