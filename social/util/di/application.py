"""Application layer DI providers."""

from dishka import Scope, provide

from social.application.usecase.auth import GetCurrentUserUseCase
from social.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    UpdateCommentUseCase,
)
from social.application.usecase.feed import (
    GetCommentsUseCase,
    GetFeedUseCase,
    GetPostDetailUseCase,
    GetRepliesUseCase,
    ListPostsUseCase,
)
from social.application.usecase.follow import (
    FollowUserUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    UnfollowUserUseCase,
)
from social.application.usecase.like import LikeUseCase, UnlikeUseCase
from social.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    UpdatePostUseCase,
)
from social.application.usecase.reply import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    UpdateReplyUseCase,
)
from social.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Feed use cases
    @provide
    def get_feed_use_case(self, feed_service: FeedService) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(feed_service=feed_service)

    @provide
    def get_list_posts_use_case(self, feed_service: FeedService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(feed_service=feed_service)

    @provide
    def get_post_detail_use_case(
        self, feed_service: FeedService
    ) -> GetPostDetailUseCase:
        """Provide get post detail use case."""
        return GetPostDetailUseCase(feed_service=feed_service)

    @provide
    def get_comments_use_case(
        self, feed_service: FeedService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(feed_service=feed_service, post_service=post_service)

    @provide
    def get_replies_use_case(
        self, feed_service: FeedService, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            feed_service=feed_service, comment_service=comment_service
        )

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide
    def get_create_reply_use_case(
        self, reply_service: ReplyService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(reply_service=reply_service)

    @provide
    def get_update_reply_use_case(
        self, reply_service: ReplyService
    ) -> UpdateReplyUseCase:
        """Provide update reply use case."""
        return UpdateReplyUseCase(reply_service=reply_service)

    @provide
    def get_delete_reply_use_case(
        self, reply_service: ReplyService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(reply_service=reply_service)

    # Like use cases
    @provide
    def get_like_use_case(self, like_service: LikeService) -> LikeUseCase:
        """Provide like use case."""
        return LikeUseCase(like_service=like_service)

    @provide
    def get_unlike_use_case(self, like_service: LikeService) -> UnlikeUseCase:
        """Provide unlike use case."""
        return UnlikeUseCase(like_service=like_service)

    # Follow use cases
    @provide
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide
    def get_unfollow_user_use_case(
        self, follow_service: FollowService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follow_service=follow_service)

    @provide
    def get_followers_use_case(
        self, follow_service: FollowService, user_service: UserService
    ) -> GetFollowersUseCase:
        """Provide get followers use case."""
        return GetFollowersUseCase(
            follow_service=follow_service, user_service=user_service
        )

    @provide
    def get_following_use_case(
        self, follow_service: FollowService, user_service: UserService
    ) -> GetFollowingUseCase:
        """Provide get following use case."""
        return GetFollowingUseCase(
            follow_service=follow_service, user_service=user_service
        )

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService, follow_service: FollowService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, follow_service=follow_service
        )

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)
