"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from social.config import Settings
from social.domain.repository import (
    CommentRepository,
    FeedRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    ReplyRepository,
    UserRepository,
)
from social.persistence.database import create_engine, create_session_factory
from social.persistence.repository import (
    PostgresCommentRepository,
    PostgresFeedRepository,
    PostgresFollowRepository,
    PostgresLikeRepository,
    PostgresPostRepository,
    PostgresReplyRepository,
    PostgresUserRepository,
)
from social.util.di.base import ProviderBase
from social.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Repositories are bound here; implementations supply the engine and
    the request session.
    """

    __mock_component__ = "persistence"

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        """Provide Reply repository."""
        return PostgresReplyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like repository."""
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_feed_repository(self, session: AsyncSession) -> FeedRepository:
        """Provide Feed repository."""
        return PostgresFeedRepository(session)


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
