from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from review_widget.core.config import settings
from review_widget.core.database import create_engine, create_session_factory, create_tables
from review_widget.core.errors import register_exception_handlers
from review_widget.core.logging import configure_logging, get_logger
from review_widget.routers import api_router
from review_widget.services.seed import seed_demo_data
from review_widget.services.sql_store import SqlReviewStore
from review_widget.services.store import MemoryReviewStore

TAGS_METADATA = [
    {"name": "Reviews", "description": "Listing reviews: submit, like/dislike, delete, rating summary and filtered pages."},
    {"name": "Health", "description": "Liveness probe."},
]

DESCRIPTION = """
# Review Widget API

Backend for the review widget on a marketplace listing page.

## Review shape

```json
{"id": "uuid", "username": "Sarah Johnson", "rating": 5, "content": "Absolutely love this app!",
 "likes": 8, "dislikes": 0, "createdAt": "2024-01-15T00:00:00Z"}
```

## Listing pages

`GET /reviews/view?rating=all&sort=newest&page=1` returns the summary (overall rating,
5→1 distribution), one page of reviews and paging meta. `rating` is `all` or 1-5,
`sort` is `newest`, `oldest` or `most-liked`.
"""

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = None
    if settings.STORE_BACKEND == "database":
        engine = create_engine(settings.DATABASE_URL)
        await create_tables(engine)
        app.state.store = SqlReviewStore(create_session_factory(engine))
    else:
        app.state.store = MemoryReviewStore()

    if settings.SEED_DEMO_DATA:
        await seed_demo_data(app.state.store)
    logger.info("store_ready", backend=settings.STORE_BACKEND)

    yield

    if engine is not None:
        await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=DESCRIPTION,
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health", tags=["Health"])
async def health():
    """Liveness probe."""
    return {"status": "ok"}
