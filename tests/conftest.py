import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from review_widget.core.database import create_engine, create_session_factory, create_tables
from review_widget.core.deps import get_store
from review_widget.main import app
from review_widget.schemas.review import Review
from review_widget.services.seed import seed_demo_data
from review_widget.services.sql_store import SqlReviewStore
from review_widget.services.store import MemoryReviewStore

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_review(rating: int = 5, likes: int = 0, dislikes: int = 0, days_ago: int = 0, username: str = "Tester") -> Review:
    return Review(
        id=str(uuid.uuid4()),
        username=username,
        rating=rating,
        content="A perfectly ordinary review text.",
        likes=likes,
        dislikes=dislikes,
        created_at=datetime(2024, 6, 1, tzinfo=timezone.utc) - timedelta(days=days_ago),
    )


@pytest_asyncio.fixture
async def empty_store():
    return MemoryReviewStore()


@pytest_asyncio.fixture
async def seeded_store():
    store = MemoryReviewStore()
    await seed_demo_data(store)
    return store


@pytest_asyncio.fixture(params=["memory", "sql"])
async def any_store(request):
    """Each backend in turn, empty."""
    if request.param == "memory":
        yield MemoryReviewStore()
        return

    engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    await create_tables(engine)
    yield SqlReviewStore(create_session_factory(engine))
    await engine.dispose()


@pytest_asyncio.fixture
async def file_sql_store(tmp_path):
    """SQL store on a file database, so concurrent sessions get their own connections."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'reviews.db'}")
    await create_tables(engine)
    yield SqlReviewStore(create_session_factory(engine))
    await engine.dispose()


def _client_for(store, raise_app_exceptions: bool = True) -> AsyncClient:
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(seeded_store):
    async with _client_for(seeded_store) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def empty_client(empty_store):
    async with _client_for(empty_store) as ac:
        yield ac
    app.dependency_overrides.clear()


class BrokenStore(MemoryReviewStore):
    async def list(self):
        raise RuntimeError("storage exploded")


@pytest_asyncio.fixture
async def broken_client():
    async with _client_for(BrokenStore(), raise_app_exceptions=False) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def review_factory():
    return make_review
