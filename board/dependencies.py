from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from board.config import settings
from board.database import get_db
from board.services.post_service import PostService

# Largest value a BIGINT column or bind parameter can hold.
MAX_INT64 = 2**63 - 1

PostIdPath = Annotated[
    int,
    Path(alias="postId", ge=1, le=MAX_INT64, description="Id of the post."),
]


class PaginationParams:
    """
    Reusable FastAPI dependency that parses pagination query parameters.

    Usage in a router::

        @router.get("/posts")
        async def read_all_posts(pagination: PaginationParams = Depends()):
            ...

    Attributes
    ----------
    page:
        0-based page number, at most ``MAX_INT64``.  Pages past the last
        one are allowed and come back empty.
    size:
        Number of items per page.  Defaults to
        ``settings.DEFAULT_PAGE_SIZE`` and is clamped to
        ``settings.MAX_PAGE_SIZE`` regardless of the value supplied.
    """

    def __init__(
        self,
        page: int = Query(
            0,
            ge=0,
            le=MAX_INT64,
            description="Page number (0-based).",
        ),
        size: int | None = Query(
            None,
            ge=1,
            description="Number of items returned per page.",
        ),
    ) -> None:
        self.page = page
        if size is None:
            size = settings.DEFAULT_PAGE_SIZE
        self.size = min(size, settings.MAX_PAGE_SIZE)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)
