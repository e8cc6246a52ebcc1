"""Post endpoints - a thin HTTP layer over the post store."""

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from blogstore.api.deps import StoreDep
from blogstore.core.types import Post

router = APIRouter()


class PostResponse(BaseModel):
    """Response model for a single post."""

    title: str
    slug: str
    content: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(title=post.title, slug=post.slug, content=post.content)


class PostListResponse(BaseModel):
    """Response model for the list of post slugs."""

    slugs: list[str]


class CreatePostRequest(BaseModel):
    """Request to create a post."""

    title: str = Field(..., min_length=1, description="Post title")
    slug: str = Field(..., min_length=1, description="Post identifier and file stem")
    content: str = Field(default="", description="Markdown body")


class UpdatePostRequest(BaseModel):
    """Request to rewrite an existing post."""

    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(default="", description="Markdown body")


@router.get("/posts", response_model=PostListResponse)
def list_posts(store: StoreDep) -> PostListResponse:
    """
    List the slugs of all posts.

    Order follows the store and is not guaranteed to be sorted.
    """
    return PostListResponse(slugs=store.list_posts())


@router.get("/posts/{slug}", response_model=PostResponse)
def read_post(slug: str, store: StoreDep) -> PostResponse:
    """Get a single post by slug."""
    return PostResponse.from_post(store.read_post(slug))


@router.post(
    "/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED
)
def create_post(request: CreatePostRequest, store: StoreDep) -> PostResponse:
    """
    Create a post.

    An existing post with the same slug is overwritten.
    """
    post = Post(title=request.title, slug=request.slug, content=request.content)
    return PostResponse.from_post(store.create_post(post))


@router.put("/posts/{slug}", response_model=PostResponse)
def update_post(
    slug: str, request: UpdatePostRequest, store: StoreDep
) -> PostResponse:
    """Rewrite an existing post. Returns 404 if it does not exist."""
    post = Post(title=request.title, slug=slug, content=request.content)
    return PostResponse.from_post(store.update_post(post))


@router.delete("/posts/{slug}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(slug: str, store: StoreDep) -> None:
    """Delete a post."""
    store.delete_post(slug)
