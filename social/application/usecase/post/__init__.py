"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostResponse
from .delete_post import DeletePostRequest, DeletePostUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
