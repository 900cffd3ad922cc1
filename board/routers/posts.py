from fastapi import APIRouter, Depends

from board.dependencies import PaginationParams, PostIdPath, get_post_service
from board.schemas import (
    CreatePostRequest,
    CreatePostResponse,
    DeletePostResponse,
    PageResponse,
    ReadPostResponse,
    UpdatePostRequest,
    UpdatePostResponse,
)
from board.services.post_service import PostService

POSTS_TAG = "1. Post management"

router = APIRouter(prefix="/api/v1/posts", tags=[POSTS_TAG])

@router.post("", response_model=CreatePostResponse, summary="Create a post")
async def create_post(data: CreatePostRequest, service: PostService = Depends(get_post_service)):
    return await service.create_post(data)

@router.get("/{postId}", response_model=ReadPostResponse, summary="Read a post by id")
async def read_post_by_id(post_id: PostIdPath, service: PostService = Depends(get_post_service)):
    return await service.read_post_by_id(post_id)

@router.get("", response_model=PageResponse[ReadPostResponse], summary="Read posts page by page")
async def read_all_posts(
    pagination: PaginationParams = Depends(),
    service: PostService = Depends(get_post_service),
):
    return await service.read_all_posts(pagination.page, pagination.size)

@router.put("/{postId}", response_model=UpdatePostResponse, summary="Update a post")
async def update_post(
    post_id: PostIdPath,
    data: UpdatePostRequest,
    service: PostService = Depends(get_post_service),
):
    return await service.update_post(post_id, data)

@router.delete("/{postId}", response_model=DeletePostResponse, summary="Delete a post")
async def delete_post(post_id: PostIdPath, service: PostService = Depends(get_post_service)):
    return await service.delete_post(post_id)
