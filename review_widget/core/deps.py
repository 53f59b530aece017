from fastapi import Request

from review_widget.services.profanity import ProfanityFilter, default_filter
from review_widget.services.store import ReviewStore

_profanity_filter = default_filter()


def get_store(request: Request) -> ReviewStore:
    return request.app.state.store


def get_profanity_filter() -> ProfanityFilter:
    return _profanity_filter
