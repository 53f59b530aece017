"""Rating aggregation and the filter/sort/paginate pipeline.

Everything here is a pure function over a snapshot of reviews, recomputed on
each call. ``ReviewBrowser`` holds the caller-side state a listing page keeps
between requests (toggling a rating filter off, resetting the page when the
criteria change, clamping page navigation). No router uses it; it is for
clients that drive the listing page.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Sequence, Union

from review_widget.schemas.review import RatingBucket, Review, ReviewSummary

ALL = "all"
RATINGS = (5, 4, 3, 2, 1)

RatingFilter = Union[Literal["all"], int]


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    MOST_LIKED = "most-liked"


def overall_rating(reviews: Sequence[Review]) -> float:
    if not reviews:
        return 0.0
    return sum(r.rating for r in reviews) / len(reviews)


def rating_distribution(reviews: Sequence[Review]) -> list[RatingBucket]:
    total = len(reviews)
    buckets = []
    for rating in RATINGS:
        count = sum(1 for r in reviews if r.rating == rating)
        percentage = count / total * 100 if total else 0.0
        buckets.append(RatingBucket(rating=rating, count=count, percentage=percentage))
    return buckets


def summarize(reviews: Sequence[Review]) -> ReviewSummary:
    return ReviewSummary(
        overall_rating=overall_rating(reviews),
        total_reviews=len(reviews),
        distribution=rating_distribution(reviews),
    )


def parse_rating_filter(value: Union[str, int, None]) -> RatingFilter:
    """Turn a query value ("all", "4", 4) into a rating filter.

    Surrounding whitespace and case are ignored. Raises ValueError for anything
    that is not "all" or a plain digit 1-5 (no sign, no decimals).
    """
    if value is None:
        return ALL
    if isinstance(value, int) and not isinstance(value, bool):
        rating = value
    else:
        text = str(value).strip().lower()
        if text == ALL:
            return ALL
        if not (text.isascii() and text.isdigit()):
            raise ValueError(f"Invalid rating filter: {value!r}")
        rating = int(text)
    if rating not in RATINGS:
        raise ValueError(f"Rating filter must be 'all' or 1-5, got {rating}")
    return rating


def filter_by_rating(reviews: Sequence[Review], rating: RatingFilter = ALL) -> list[Review]:
    if rating == ALL:
        return list(reviews)
    return [r for r in reviews if r.rating == rating]


def sort_reviews(reviews: Sequence[Review], sort: Union[SortMode, str] = SortMode.NEWEST) -> list[Review]:
    sort = SortMode(sort)
    if sort is SortMode.NEWEST:
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)
    if sort is SortMode.OLDEST:
        return sorted(reviews, key=lambda r: r.created_at)
    return sorted(reviews, key=lambda r: r.likes, reverse=True)


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return math.ceil(count / page_size)


def paginate(reviews: Sequence[Review], page: int, page_size: int) -> list[Review]:
    """Slice out one page. No clamping: out-of-range pages come back empty."""
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(reviews[start:start + page_size])


def clamp_page(page: int, pages: int) -> int:
    if pages < 1:
        return 1
    return min(max(page, 1), pages)


@dataclass
class ReviewView:
    summary: ReviewSummary
    reviews: list[Review]
    page: int
    page_size: int
    total: int
    total_pages: int


def build_view(
    reviews: Sequence[Review],
    rating: RatingFilter = ALL,
    sort: Union[SortMode, str] = SortMode.NEWEST,
    page: int = 1,
    page_size: int = 5,
) -> ReviewView:
    """Filter, sort and paginate ``reviews``; the summary covers the whole set."""
    matching = sort_reviews(filter_by_rating(reviews, rating), sort)
    pages = total_pages(len(matching), page_size)
    page = clamp_page(page, pages)
    return ReviewView(
        summary=summarize(reviews),
        reviews=paginate(matching, page, page_size),
        page=page,
        page_size=page_size,
        total=len(matching),
        total_pages=pages,
    )


@dataclass
class ReviewBrowser:
    page_size: int = 5
    rating: RatingFilter = ALL
    sort: SortMode = SortMode.NEWEST
    page: int = 1
    _pages: int = field(default=0, repr=False)

    def select_rating(self, rating: RatingFilter) -> None:
        """Apply a rating filter; selecting the active one again clears it."""
        rating = parse_rating_filter(rating)
        self.rating = ALL if rating == self.rating else rating
        self.page = 1

    def select_sort(self, sort: Union[SortMode, str]) -> None:
        self.sort = SortMode(sort)
        self.page = 1

    def go_to_page(self, page: int) -> None:
        self.page = clamp_page(page, self._pages)

    def next_page(self) -> None:
        self.go_to_page(self.page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.page - 1)

    def view(self, reviews: Sequence[Review]) -> ReviewView:
        result = build_view(reviews, self.rating, self.sort, self.page, self.page_size)
        self._pages = result.total_pages
        self.page = result.page
        return result
