"""Post store backed by a directory of Markdown files.

Each post lives in ``<posts_dir>/<slug>.md``. Nothing is cached: every
call goes to disk, so the directory is the single source of truth.
Slugs are trusted and used verbatim in paths.
"""

import logging
import os
from pathlib import Path

from blogstore.core.errors import MissingHeader, StoreIOError
from blogstore.core.types import Post, StoreCallbacks, StoreEvent, StoreOperation
from blogstore.storage.frontmatter import decode_post, encode_post

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilePostStore:
    """Post store over a directory of front matter Markdown files."""

    def __init__(
        self,
        posts_dir: Path | str,
        callbacks: StoreCallbacks | None = None,
    ):
        """
        Initialize file post store.

        The directory is not checked or created here; a missing directory
        surfaces as StoreIOError from the first operation that touches it.

        Args:
            posts_dir: Directory holding post files
            callbacks: Optional hooks notified after each operation
        """
        self.posts_dir = Path(posts_dir)
        self.callbacks = callbacks or StoreCallbacks()

    def slug_to_path(self, slug: str) -> Path:
        """Map a slug to its post file path."""
        path = self.posts_dir / f"{slug}{POST_SUFFIX}"
        logger.debug("Resolved slug %r to %s", slug, path)
        return path

    @staticmethod
    def path_to_slug(path: Path) -> str:
        """Recover a slug from a post file name."""
        return path.name.removesuffix(POST_SUFFIX)

    def _write(self, path: Path, text: str, *, slug: str, create: bool) -> None:
        # Encode before opening so a bad post never truncates the existing file
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MissingHeader(
                f"Post {slug!r} cannot be encoded as UTF-8: {e}", slug=slug
            ) from e

        flags = os.O_WRONLY | os.O_TRUNC
        if create:
            flags |= os.O_CREAT
        try:
            fd = os.open(path, flags, 0o644)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.debug("Write to %s failed: %s", path, e)
            raise StoreIOError.from_os_error(e, slug=slug, path=path) from e

    def create_post(self, post: Post) -> Post:
        """Write a new post file. An existing file for the slug is overwritten."""
        path = self.slug_to_path(post.slug)
        self._write(path, encode_post(post), slug=post.slug, create=True)
        logger.debug("Created post %r at %s", post.slug, path)
        self.callbacks.emit(StoreEvent(StoreOperation.CREATE, post.slug, path))
        return post

    def read_post(self, slug: str) -> Post:
        """Read and decode the post file for ``slug``."""
        path = self.slug_to_path(slug)
        try:
            with open(path, encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise MissingHeader(f"{path} is not valid UTF-8: {e}", slug=slug) from e
        except OSError as e:
            raise StoreIOError.from_os_error(e, slug=slug, path=path) from e

        try:
            post = decode_post(text, self.path_to_slug(path))
        except MissingHeader as e:
            e.slug = slug
            logger.debug("Malformed post file %s: %s", path, e.message)
            raise

        logger.debug("Read post %r from %s", post.slug, path)
        self.callbacks.emit(StoreEvent(StoreOperation.READ, post.slug, path))
        return post

    def list_posts(self) -> list[str]:
        """
        List slugs of all post files in directory enumeration order.

        Only regular files ending in ``.md`` count as posts.
        """
        try:
            with os.scandir(self.posts_dir) as entries:
                slugs = [
                    self.path_to_slug(Path(entry.name))
                    for entry in entries
                    if entry.name.endswith(POST_SUFFIX) and entry.is_file()
                ]
        except OSError as e:
            raise StoreIOError.from_os_error(e, path=self.posts_dir) from e

        logger.debug("Listed %d posts in %s", len(slugs), self.posts_dir)
        self.callbacks.emit(StoreEvent(StoreOperation.LIST, path=self.posts_dir))
        return slugs

    def update_post(self, post: Post) -> Post:
        """Overwrite an existing post file. Fails if the file is missing."""
        path = self.slug_to_path(post.slug)
        self._write(path, encode_post(post), slug=post.slug, create=False)
        logger.debug("Updated post %r at %s", post.slug, path)
        self.callbacks.emit(StoreEvent(StoreOperation.UPDATE, post.slug, path))
        return post

    def delete_post(self, slug: str) -> None:
        """Remove the post file for ``slug``."""
        path = self.slug_to_path(slug)
        try:
            path.unlink()
        except OSError as e:
            raise StoreIOError.from_os_error(e, slug=slug, path=path) from e
        logger.debug("Deleted post %r at %s", slug, path)
        self.callbacks.emit(StoreEvent(StoreOperation.DELETE, slug, path))
