"""PostgreSQL implementation of Follow repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Follow
from social.domain.repository import FollowRepository
from social.domain.value import UserId
from social.persistence.mappers import follow_to_dict, row_to_follow
from social.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, follower_id: UserId, followed_id: UserId) -> Optional[Follow]:
        """Find the edge ``follower_id -> followed_id``."""
        stmt = select(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followed_id == followed_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def find_followers(self, user_id: UserId) -> List[Follow]:
        """Find follows pointing at a user, most recent first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.followed_id == user_id)
            .order_by(follows_table.c.created_at.desc(), follows_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def find_following(self, user_id: UserId) -> List[Follow]:
        """Find follows made by a user, most recent first."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.follower_id == user_id)
            .order_by(follows_table.c.created_at.desc(), follows_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def save(self, follow: Follow) -> Follow:
        """Save a follow (create)."""
        stmt = insert(follows_table).values(**follow_to_dict(follow))
        await self.session.execute(stmt)
        await self.session.flush()
        return follow

    async def delete(self, follower_id: UserId, followed_id: UserId) -> bool:
        """Delete the edge ``follower_id -> followed_id``."""
        stmt = delete(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followed_id == followed_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
