from app.domains.posts.schemas import (
    PostBase, PostCreate, PostUpdate, PostResponse, PostDetailResponse,
    PostStats, PostListResponse, LikesResponse
)
from app.domains.posts.services import PostService

__all__ = [
    "PostBase", "PostCreate", "PostUpdate", "PostResponse", "PostDetailResponse",
    "PostStats", "PostListResponse", "LikesResponse",
    "PostService"
]
