import uuid
from datetime import datetime, timezone

from review_widget.core.logging import get_logger
from review_widget.schemas.review import Review
from review_widget.services.store import ReviewStore

logger = get_logger(__name__)

DEMO_REVIEWS = [
    {
        "username": "Sarah Johnson",
        "rating": 5,
        "content": "Absolutely love this app! The interface is intuitive and the shopping experience is seamless. The barcode scanner feature is incredibly useful when comparing prices in stores. Highly recommend!",
        "likes": 8,
        "dislikes": 0,
        "created_at": datetime(2024, 1, 15, tzinfo=timezone.utc),
    },
    {
        "username": "Mike Chen",
        "rating": 4,
        "content": "Great app overall! The wishlist feature is fantastic and the price tracking alerts have saved me money. Only minor issue is that it can be a bit slow to load sometimes, but still worth using.",
        "likes": 5,
        "dislikes": 1,
        "created_at": datetime(2024, 1, 12, tzinfo=timezone.utc),
    },
    {
        "username": "Emily Rodriguez",
        "rating": 5,
        "content": "This app has completely transformed my shopping experience! The personalized recommendations are spot-on, and I love how it organizes my shopping lists. The customer service integration is also excellent. Five stars!",
        "likes": 12,
        "dislikes": 0,
        "created_at": datetime(2024, 1, 10, tzinfo=timezone.utc),
    },
    {
        "username": "David Park",
        "rating": 3,
        "content": "The app is decent but has room for improvement. Some features work well, but the search function could be more accurate. Also, the app crashes occasionally on my device. It's usable but not exceptional.",
        "likes": 2,
        "dislikes": 3,
        "created_at": datetime(2024, 1, 8, tzinfo=timezone.utc),
    },
    {
        "username": "Alex Thompson",
        "rating": 4,
        "content": "Really solid shopping app with great features. The price comparison tool is my favorite feature - it's saved me hundreds of dollars! The interface could be a bit more modern, but functionality-wise it's excellent.",
        "likes": 7,
        "dislikes": 0,
        "created_at": datetime(2024, 1, 5, tzinfo=timezone.utc),
    },
]


def demo_reviews() -> list[Review]:
    """Fresh copies of the demo dataset, each with a new id."""
    return [Review(id=str(uuid.uuid4()), **data) for data in DEMO_REVIEWS]


async def seed_demo_data(store: ReviewStore) -> int:
    """Load the demo dataset into an empty store. Returns the number of reviews added."""
    if await store.list():
        return 0
    added = await store.seed(demo_reviews())
    logger.info("demo_data_seeded", count=added)
    return added
