"""Follow graph repository."""

from typing import List
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.follow import Follow


class FollowRepository:
    """Reads and writes follower -> followed edges."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def is_following(self, follower_id: UUID, followed_id: UUID) -> bool:
        stmt = select(Follow.id).where(
            and_(Follow.follower_id == follower_id, Follow.followed_id == followed_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def follow(self, follower_id: UUID, followed_id: UUID) -> Follow:
        """Create the edge; both users' sets change in this one commit."""
        edge = Follow(follower_id=follower_id, followed_id=followed_id)
        self.session.add(edge)
        await self.session.commit()
        return edge

    async def unfollow(self, follower_id: UUID, followed_id: UUID) -> bool:
        stmt = delete(Follow).where(
            and_(Follow.follower_id == follower_id, Follow.followed_id == followed_id)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def get_follower_ids(self, user_id: UUID) -> List[UUID]:
        """Users following ``user_id``, oldest follow first."""
        stmt = (
            select(Follow.follower_id)
            .where(Follow.followed_id == user_id)
            .order_by(Follow.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_following_ids(self, user_id: UUID) -> List[UUID]:
        stmt = (
            select(Follow.followed_id)
            .where(Follow.follower_id == user_id)
            .order_by(Follow.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def count_followers(self, user_id: UUID) -> int:
        stmt = select(func.count(Follow.id)).where(Follow.followed_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_following(self, user_id: UUID) -> int:
        stmt = select(func.count(Follow.id)).where(Follow.follower_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
