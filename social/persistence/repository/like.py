"""PostgreSQL implementation of Like repository."""

from typing import Optional, Union

from sqlalchemy import Table, and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Like
from social.domain.repository import LikeRepository
from social.domain.value import CommentId, LikeTarget, PostId, UserId
from social.persistence.mappers import like_to_dict, row_to_like
from social.persistence.tables import comment_likes_table, post_likes_table


def _table_for(target: LikeTarget) -> tuple[Table, str]:
    if target == LikeTarget.POST:
        return post_likes_table, "post_id"
    return comment_likes_table, "comment_id"


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    Post likes and comment likes live in separate tables; ``LikeTarget``
    selects the table.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        table, target_column = _table_for(target)
        stmt = select(table).where(
            and_(
                table.c.user_id == user_id,
                table.c[target_column] == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict(), target) if row else None

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        table, _ = _table_for(like.target)
        stmt = insert(table).values(**like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target: LikeTarget,
        target_id: Union[PostId, CommentId],
    ) -> bool:
        """Delete a user's like on an item."""
        table, target_column = _table_for(target)
        stmt = delete(table).where(
            and_(
                table.c.user_id == user_id,
                table.c[target_column] == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_target(
        self, target: LikeTarget, target_id: Union[PostId, CommentId]
    ) -> int:
        """Count likes on an item."""
        table, target_column = _table_for(target)
        stmt = select(func.count()).select_from(table).where(
            table.c[target_column] == target_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
