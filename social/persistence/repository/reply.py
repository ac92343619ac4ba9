"""PostgreSQL implementation of Reply repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Reply
from social.domain.repository import ReplyRepository
from social.domain.value import ReplyId
from social.persistence.mappers import reply_to_dict, row_to_reply
from social.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create or update)."""
        existing = await self.find_by_id(reply.id)

        reply_dict = reply_to_dict(reply)

        if existing:
            stmt = (
                replies_table.update()
                .where(replies_table.c.id == reply.id)
                .values(
                    message=reply_dict["message"],
                    updated_at=reply_dict["updated_at"],
                )
            )
        else:
            stmt = replies_table.insert().values(**reply_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return reply

    async def delete(self, reply_id: ReplyId) -> bool:
        """Delete a reply."""
        stmt = delete(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
