"""
Post repository: the store behind the post service.

``find_all`` pages with a 0-based page number and orders by primary key,
which is insertion order for auto-assigned ids.  Two SQL statements are
issued per page: a COUNT for the totals and a LIMIT/OFFSET SELECT for
the rows.
"""
import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.models import Post

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A bounded slice of a collection plus the metadata needed to page it."""

    content: list[T]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 0

    @property
    def first(self) -> bool:
        return self.page == 0

    @property
    def last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        """Return a page with *fn* applied to every item and the same metadata."""
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
        )


class PostRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save(self, post: Post) -> Post:
        """Insert or update *post*; a new post gets its id on flush."""
        self.db.add(post)
        await self.db.flush()
        return post

    async def find_by_id(self, post_id: int) -> Post | None:
        return await self.db.get(Post, post_id)

    async def find_all(self, page: int, size: int) -> Page[Post]:
        total: int = (
            await self.db.execute(select(func.count()).select_from(Post))
        ).scalar_one()

        offset = page * size
        if offset >= total:
            # Past the last row; the offset may not even fit in a BIGINT.
            return Page(content=[], page=page, size=size, total_elements=total)

        q = select(Post).order_by(Post.id).offset(offset).limit(size)
        result = await self.db.execute(q)
        return Page(
            content=list(result.scalars().all()),
            page=page,
            size=size,
            total_elements=total,
        )

    async def delete(self, post: Post) -> None:
        await self.db.delete(post)
        await self.db.flush()
