"""Response shapes shared by the feed use cases."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model.feed import AuthorSummary, CommentView, PostView, ReplyView


class AuthorResponse(BaseModel):
    """Minimal author projection."""

    id: str
    name: str
    last_name: str
    username: str

    @classmethod
    def from_summary(cls, author: AuthorSummary) -> "AuthorResponse":
        return cls(
            id=str(author.id),
            name=author.name,
            last_name=author.last_name,
            username=str(author.username),
        )


class ReplyResponse(BaseModel):
    """Reply with its author."""

    id: str
    comment_id: str
    message: str
    author: AuthorResponse
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, reply: ReplyView) -> "ReplyResponse":
        return cls(
            id=str(reply.id),
            comment_id=str(reply.comment_id),
            message=reply.message,
            author=AuthorResponse.from_summary(reply.author),
            created_at=reply.created_at,
            updated_at=reply.updated_at,
        )


class CommentResponse(BaseModel):
    """Comment with counts, viewer flags and (when loaded) replies."""

    id: str
    post_id: str
    content: str
    author: AuthorResponse
    created_at: datetime
    updated_at: datetime
    like_count: int
    reply_count: int
    is_liked: bool
    is_following: bool
    replies: list[ReplyResponse]

    @classmethod
    def from_view(cls, comment: CommentView) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            author=AuthorResponse.from_summary(comment.author),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            like_count=comment.like_count,
            reply_count=comment.reply_count,
            is_liked=comment.is_liked_by_viewer,
            is_following=comment.is_author_followed_by_viewer,
            replies=[ReplyResponse.from_view(reply) for reply in comment.replies],
        )


class PostResponse(BaseModel):
    """Post with counts, viewer flags and its comments."""

    id: str
    content: str
    author: AuthorResponse
    created_at: datetime
    updated_at: datetime
    like_count: int
    comment_count: int
    is_liked: bool
    is_following: bool
    comments: list[CommentResponse]

    @classmethod
    def from_view(cls, post: PostView) -> "PostResponse":
        return cls(
            id=str(post.id),
            content=post.content,
            author=AuthorResponse.from_summary(post.author),
            created_at=post.created_at,
            updated_at=post.updated_at,
            like_count=post.like_count,
            comment_count=post.comment_count,
            is_liked=post.is_liked_by_viewer,
            is_following=post.is_author_followed_by_viewer,
            comments=[CommentResponse.from_view(c) for c in post.comments],
        )


class PostListResponse(BaseModel):
    """A window of posts."""

    posts: list[PostResponse]
    limit: int
    offset: int
