"""YAML front matter parsing and writing for post files.

A post file looks like::

    ---
    title: Sample Post
    ---
    Body text...

The slug is not part of the header; it comes from the file name.
"""

from dataclasses import dataclass

import yaml

from blogstore.core.errors import MissingHeader
from blogstore.core.types import Post

DELIMITER = "---"

# Characters YAML folds as line breaks unless they are escaped
_YAML_BREAKS = frozenset("\x85\u2028\u2029")


@dataclass(frozen=True)
class PostFrontmatter:
    """Parsed front matter from a post file."""

    title: str


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def parse_frontmatter(text: str) -> tuple[PostFrontmatter, str]:
    """
    Split post file text into front matter and body.

    Args:
        text: Full file content including front matter

    Returns:
        (frontmatter, body) - body is trimmed

    Raises:
        MissingHeader: If the header block is absent or cannot be parsed
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        raise MissingHeader("Missing front matter: file must start with '---'")

    for end, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            break
    else:
        raise MissingHeader("Unterminated front matter: no closing '---'")

    header = "".join(lines[1:end])
    body = "".join(lines[end + 1 :])

    try:
        # BaseLoader keeps every scalar as written, so `title: 2022` stays "2022"
        raw = yaml.load(header, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise MissingHeader(f"Invalid YAML in front matter: {e}") from e

    if not isinstance(raw, dict):
        raise MissingHeader(
            f"Front matter must be a mapping, got {type(raw).__name__}"
        )

    title = raw.get("title")
    if not isinstance(title, str):
        raise MissingHeader("Front matter has no 'title' string")

    return PostFrontmatter(title=title), body.strip()


def _needs_escaping(text: str) -> bool:
    return any(ch in _YAML_BREAKS or "\x80" <= ch <= "\x9f" for ch in text)


def write_frontmatter(frontmatter: PostFrontmatter) -> str:
    """
    Write front matter to a YAML block with --- delimiters.

    Args:
        frontmatter: Front matter to serialize

    Returns:
        Header text ending in a newline
    """
    header = yaml.safe_dump(
        {"title": frontmatter.title},
        allow_unicode=not _needs_escaping(frontmatter.title),
        sort_keys=False,
        default_flow_style=False,
    )
    return f"{DELIMITER}\n{header}{DELIMITER}\n"


def encode_post(post: Post) -> str:
    """Serialize a post to file text. The slug is not written."""
    return write_frontmatter(PostFrontmatter(title=post.title)) + (
        post.content.strip() + "\n"
    )


def decode_post(text: str, slug: str) -> Post:
    """Parse file text into a post identified by ``slug``."""
    frontmatter, body = parse_frontmatter(text)
    return Post(title=frontmatter.title, slug=slug, content=body)
