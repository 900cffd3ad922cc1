"""
Post service: maps transfer shapes to the Post entity and back.

Design notes
------------
- The repository is passed in explicitly; when omitted one is built on
  the same session the service uses for its transactions.
- ``update_post`` writes the new state with an explicit ``save`` (flush)
  before the transaction commits rather than relying on the session's
  dirty tracking at commit time.
- ``PostNotFoundError`` is raised here and never caught in this module.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from board.database import transaction
from board.exceptions import PostNotFoundError
from board.models import Post
from board.repositories.post_repository import PostRepository
from board.schemas import (
    CreatePostRequest,
    CreatePostResponse,
    DeletePostResponse,
    PageResponse,
    ReadPostResponse,
    UpdatePostRequest,
    UpdatePostResponse,
)

logger = logging.getLogger(__name__)


def _to_read_response(post: Post) -> ReadPostResponse:
    return ReadPostResponse(post_id=post.id, title=post.title, content=post.content)


class PostService:
    def __init__(self, db: AsyncSession, repository: PostRepository | None = None) -> None:
        self.db = db
        self.repository = repository if repository is not None else PostRepository(db)

    async def _get_or_raise(self, post_id: int) -> Post:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.warning("Post %s not found", post_id)
            raise PostNotFoundError(post_id)
        return post

    async def create_post(self, request: CreatePostRequest) -> CreatePostResponse:
        async with transaction(self.db):
            post = Post.create(title=request.title, content=request.content)
            saved = await self.repository.save(post)

        logger.info("Created post %s", saved.id)
        return CreatePostResponse(post_id=saved.id, title=saved.title, content=saved.content)

    async def read_post_by_id(self, post_id: int) -> ReadPostResponse:
        post = await self._get_or_raise(post_id)
        return _to_read_response(post)

    async def read_all_posts(self, page: int, size: int) -> PageResponse[ReadPostResponse]:
        """
        Return page *page* (0-based) of *size* posts in id order.

        A page past the last one comes back with empty content and the
        real totals rather than as an error.
        """
        found = (await self.repository.find_all(page, size)).map(_to_read_response)
        return PageResponse[ReadPostResponse](
            content=found.content,
            page=found.page,
            size=found.size,
            total_elements=found.total_elements,
            total_pages=found.total_pages,
            first=found.first,
            last=found.last,
            empty=found.empty,
        )

    async def update_post(self, post_id: int, request: UpdatePostRequest) -> UpdatePostResponse:
        async with transaction(self.db):
            post = await self._get_or_raise(post_id)
            post.update(title=request.title, content=request.content)
            await self.repository.save(post)

        logger.info("Updated post %s", post.id)
        return UpdatePostResponse(post_id=post.id, title=post.title, content=post.content)

    async def delete_post(self, post_id: int) -> DeletePostResponse:
        async with transaction(self.db):
            post = await self._get_or_raise(post_id)
            await self.repository.delete(post)

        logger.info("Deleted post %s", post_id)
        return DeletePostResponse(post_id=post_id)
