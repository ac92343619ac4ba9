"""Domain layer DI providers."""

from dishka import Scope, provide

from social.config import AuthSettings
from social.domain.repository import (
    CommentRepository,
    FeedRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    ReplyRepository,
    UserRepository,
)
from social.domain.service import (
    CommentService,
    FeedService,
    FollowService,
    JWTService,
    LikeService,
    PostService,
    ReplyService,
    UserService,
)
from social.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_service: PostService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_service=post_service
        )

    @provide
    def get_reply_service(
        self, reply_repository: ReplyRepository, comment_service: CommentService
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            reply_repository=reply_repository, comment_service=comment_service
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_service: PostService,
        comment_service: CommentService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_follow_service(
        self, follow_repository: FollowRepository, user_service: UserService
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository, user_service=user_service
        )

    @provide
    def get_feed_service(self, feed_repository: FeedRepository) -> FeedService:
        """Provide feed domain service."""
        return FeedService(feed_repository=feed_repository)
