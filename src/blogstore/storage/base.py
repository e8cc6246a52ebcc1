"""Post store capability set shared by every storage backend."""

from typing import Protocol, runtime_checkable

from blogstore.core.types import Post


@runtime_checkable
class PostStore(Protocol):
    """Create, read, list, update and delete posts by slug.

    Failures are raised as StoreIOError or MissingHeader.
    """

    def create_post(self, post: Post) -> Post:
        """Store a post, overwriting any existing post with the same slug."""
        ...

    def read_post(self, slug: str) -> Post:
        """Load the post stored under ``slug``."""
        ...

    def list_posts(self) -> list[str]:
        """List the slugs of all stored posts, in storage order."""
        ...

    def update_post(self, post: Post) -> Post:
        """Rewrite an existing post. Never creates one."""
        ...

    def delete_post(self, slug: str) -> None:
        """Remove the post stored under ``slug``."""
        ...
