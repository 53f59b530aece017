"""SQLAlchemy-backed review store.

Same contract as ``MemoryReviewStore``. Counter changes are single UPDATE
statements evaluated by the database, so concurrent likes never lose an
increment and decrements stop at zero.
"""

from typing import Iterable

from sqlalchemy import case, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from review_widget.core.errors import ReviewNotFoundError
from review_widget.core.logging import get_logger
from review_widget.models.review import ReviewRecord
from review_widget.schemas.review import Review

logger = get_logger(__name__)


class SqlReviewStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list(self) -> list[Review]:
        async with self.session_factory() as db:
            result = await db.execute(select(ReviewRecord))
            return [Review.model_validate(r) for r in result.scalars().all()]

    async def create(self, username: str, rating: int, content: str) -> Review:
        async with self.session_factory() as db:
            record = ReviewRecord(username=username, rating=rating, content=content, likes=0, dislikes=0)
            db.add(record)
            await db.commit()
            await db.refresh(record)
            review = Review.model_validate(record)
        logger.info("review_created", review_id=review.id, rating=rating)
        return review

    async def like(self, review_id: str) -> Review:
        return await self._adjust(review_id, ReviewRecord.likes, 1)

    async def unlike(self, review_id: str) -> Review:
        return await self._adjust(review_id, ReviewRecord.likes, -1)

    async def dislike(self, review_id: str) -> Review:
        return await self._adjust(review_id, ReviewRecord.dislikes, 1)

    async def undislike(self, review_id: str) -> Review:
        return await self._adjust(review_id, ReviewRecord.dislikes, -1)

    async def delete(self, review_id: str) -> bool:
        async with self.session_factory() as db:
            result = await db.execute(
                delete(ReviewRecord).where(ReviewRecord.id == review_id).execution_options(synchronize_session=False)
            )
            await db.commit()
        existed = result.rowcount > 0
        if existed:
            logger.info("review_deleted", review_id=review_id)
        return existed

    async def seed(self, reviews: Iterable[Review]) -> int:
        reviews = list(reviews)
        async with self.session_factory() as db:
            existing = await db.execute(select(ReviewRecord.id).where(ReviewRecord.id.in_([r.id for r in reviews])))
            taken = set(existing.scalars().all())
            records = [ReviewRecord(**r.model_dump()) for r in reviews if r.id not in taken]
            db.add_all(records)
            await db.commit()
        return len(records)

    async def _adjust(self, review_id: str, column, delta: int) -> Review:
        if delta > 0:
            value = column + delta
        else:
            value = case((column > 0, column - 1), else_=0)

        async with self.session_factory() as db:
            result = await db.execute(
                update(ReviewRecord)
                .where(ReviewRecord.id == review_id)
                .values({column.key: value})
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await db.rollback()
                raise ReviewNotFoundError(review_id)
            await db.commit()

            record = (await db.execute(select(ReviewRecord).where(ReviewRecord.id == review_id))).scalar_one()
            return Review.model_validate(record)
