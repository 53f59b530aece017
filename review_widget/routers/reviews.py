from fastapi import APIRouter, Depends, HTTPException, Query, status

from review_widget.core.config import settings
from review_widget.core.deps import get_profanity_filter, get_store
from review_widget.core.errors import ReviewNotFoundError
from review_widget.schemas.review import (
    CreateReviewRequest,
    DeleteReviewResponse,
    ProfanityCheckRequest,
    ProfanityCheckResponse,
    Review,
    ReviewListResponse,
    ReviewMeta,
    ReviewSummary,
)
from review_widget.services import ratings
from review_widget.services.profanity import ProfanityFilter
from review_widget.services.store import ReviewStore

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=list[Review], summary="All reviews", description="Every review in the store, in no particular order.")
async def list_reviews(store: ReviewStore = Depends(get_store)):
    return await store.list()


@router.post("", response_model=Review, summary="Submit a review", description="Creates a review with zeroed like/dislike counters.")
async def create_review(body: CreateReviewRequest, store: ReviewStore = Depends(get_store)):
    return await store.create(body.username, body.rating, body.content)


@router.get("/summary", response_model=ReviewSummary, summary="Rating summary", description="Overall rating and the 5→1 rating distribution.")
async def get_summary(store: ReviewStore = Depends(get_store)):
    return ratings.summarize(await store.list())


@router.get(
    "/view",
    response_model=ReviewListResponse,
    summary="Filtered review page",
    description="Reviews filtered by rating, sorted and paginated. Out-of-range pages are clamped.",
)
async def view_reviews(
    rating: str = Query(ratings.ALL, description="`all` or a star value 1-5"),
    sort: ratings.SortMode = Query(ratings.SortMode.NEWEST),
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.REVIEWS_PER_PAGE, ge=1, le=settings.MAX_REVIEWS_PER_PAGE, alias="perPage"),
    store: ReviewStore = Depends(get_store),
):
    try:
        rating_filter = ratings.parse_rating_filter(rating)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    view = ratings.build_view(await store.list(), rating_filter, sort, page, per_page)
    return ReviewListResponse(
        summary=view.summary,
        data=view.reviews,
        meta=ReviewMeta(page=view.page, per_page=view.page_size, total=view.total, total_pages=view.total_pages),
    )


@router.post(
    "/profanity-check",
    response_model=ProfanityCheckResponse,
    summary="Check text for profanity",
    description="Advisory check a submission form can run before posting. The store does not enforce it.",
)
async def check_profanity(body: ProfanityCheckRequest, profanity: ProfanityFilter = Depends(get_profanity_filter)):
    matches = profanity.find_profanity(body.content)
    return ProfanityCheckResponse(has_profanity=bool(matches), matches=matches)


async def _update_counter(action, review_id: str) -> Review:
    try:
        return await action(review_id)
    except ReviewNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")


@router.post("/{review_id}/like", response_model=Review, summary="Like a review")
async def like_review(review_id: str, store: ReviewStore = Depends(get_store)):
    return await _update_counter(store.like, review_id)


@router.post("/{review_id}/unlike", response_model=Review, summary="Remove a like", description="Never drops below zero.")
async def unlike_review(review_id: str, store: ReviewStore = Depends(get_store)):
    return await _update_counter(store.unlike, review_id)


@router.post("/{review_id}/dislike", response_model=Review, summary="Dislike a review")
async def dislike_review(review_id: str, store: ReviewStore = Depends(get_store)):
    return await _update_counter(store.dislike, review_id)


@router.post("/{review_id}/undislike", response_model=Review, summary="Remove a dislike", description="Never drops below zero.")
async def undislike_review(review_id: str, store: ReviewStore = Depends(get_store)):
    return await _update_counter(store.undislike, review_id)


@router.delete("/{review_id}", response_model=DeleteReviewResponse, summary="Delete a review")
async def delete_review(review_id: str, store: ReviewStore = Depends(get_store)):
    return DeleteReviewResponse(deleted=await store.delete(review_id))
