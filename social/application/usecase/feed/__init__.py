"""Feed use cases."""

from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_feed import GetFeedRequest, GetFeedUseCase
from .get_post_detail import GetPostDetailRequest, GetPostDetailUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .views import (
    AuthorResponse,
    CommentResponse,
    PostListResponse,
    PostResponse,
    ReplyResponse,
)

__all__ = [
    "AuthorResponse",
    "CommentResponse",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetFeedRequest",
    "GetFeedUseCase",
    "GetPostDetailRequest",
    "GetPostDetailUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostListResponse",
    "PostResponse",
    "ReplyResponse",
]
