"""FastAPI dependencies for the blogstore API."""

from typing import Annotated

from fastapi import Depends

from blogstore.storage import PostStore, get_store


async def get_store_instance() -> PostStore:
    """
    Get the post store for request processing.

    Returns:
        Default PostStore instance
    """
    return get_store()


# Type aliases for dependency injection
StoreDep = Annotated[PostStore, Depends(get_store_instance)]
