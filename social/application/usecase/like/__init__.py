"""Like use cases."""

from .like import LikeRequest, LikeResponse, LikeUseCase, UnlikeUseCase

__all__ = [
    "LikeRequest",
    "LikeResponse",
    "LikeUseCase",
    "UnlikeUseCase",
]
