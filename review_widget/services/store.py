"""Review storage.

``ReviewStore`` is the contract the routers depend on. ``MemoryReviewStore``
is the default backend: a single dict shared by every request, guarded by one
lock so counter updates from concurrent callers never interleave. Records are
replaced by updated copies, so a list already handed to a caller never changes
underneath it.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Iterable, Protocol

from review_widget.core.errors import ReviewNotFoundError
from review_widget.core.logging import get_logger
from review_widget.schemas.review import Review

logger = get_logger(__name__)


class ReviewStore(Protocol):
    async def list(self) -> list[Review]: ...

    async def create(self, username: str, rating: int, content: str) -> Review: ...

    async def like(self, review_id: str) -> Review: ...

    async def unlike(self, review_id: str) -> Review: ...

    async def dislike(self, review_id: str) -> Review: ...

    async def undislike(self, review_id: str) -> Review: ...

    async def delete(self, review_id: str) -> bool: ...

    async def seed(self, reviews: Iterable[Review]) -> int: ...


class MemoryReviewStore:
    def __init__(self):
        self._reviews: dict[str, Review] = {}
        self._lock = threading.Lock()

    async def list(self) -> list[Review]:
        with self._lock:
            return list(self._reviews.values())

    async def create(self, username: str, rating: int, content: str) -> Review:
        review = Review(
            id=str(uuid.uuid4()),
            username=username,
            rating=rating,
            content=content,
            likes=0,
            dislikes=0,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._reviews[review.id] = review
        logger.info("review_created", review_id=review.id, rating=rating)
        return review

    async def like(self, review_id: str) -> Review:
        return self._adjust(review_id, "likes", 1)

    async def unlike(self, review_id: str) -> Review:
        return self._adjust(review_id, "likes", -1)

    async def dislike(self, review_id: str) -> Review:
        return self._adjust(review_id, "dislikes", 1)

    async def undislike(self, review_id: str) -> Review:
        return self._adjust(review_id, "dislikes", -1)

    async def delete(self, review_id: str) -> bool:
        with self._lock:
            existed = self._reviews.pop(review_id, None) is not None
        if existed:
            logger.info("review_deleted", review_id=review_id)
        return existed

    async def seed(self, reviews: Iterable[Review]) -> int:
        count = 0
        with self._lock:
            for review in reviews:
                if review.id in self._reviews:
                    continue
                self._reviews[review.id] = review
                count += 1
        return count

    def _adjust(self, review_id: str, counter: str, delta: int) -> Review:
        with self._lock:
            review = self._reviews.get(review_id)
            if review is None:
                raise ReviewNotFoundError(review_id)
            value = max(getattr(review, counter) + delta, 0)
            if value == getattr(review, counter):
                return review
            updated = review.model_copy(update={counter: value})
            self._reviews[review_id] = updated
        logger.debug("review_counter_changed", review_id=review_id, counter=counter, value=value)
        return updated
