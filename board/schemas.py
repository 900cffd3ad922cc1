from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for transfer shapes: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---

class PostBase(CamelModel):
    title: str = Field(max_length=255)
    content: str


class CreatePostRequest(PostBase):
    pass


class UpdatePostRequest(PostBase):
    pass


# --- Responses ---

class PostResponse(CamelModel):
    post_id: int
    title: str
    content: str


class CreatePostResponse(PostResponse):
    pass


class ReadPostResponse(PostResponse):
    pass


class UpdatePostResponse(PostResponse):
    pass


class DeletePostResponse(CamelModel):
    post_id: int


# --- Pagination ---

class PageResponse(CamelModel, Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    empty: bool
