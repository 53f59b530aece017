"""Advisory profanity check for review submissions.

The denylist comes from ``settings.PROFANITY_WORDS``. Matching is a plain
case-insensitive substring scan, so it is a UX hint for submission forms and
not a moderation control. The store never consults it.
"""

from typing import Iterable

from review_widget.core.config import settings


class ProfanityFilter:
    def __init__(self, words: Iterable[str]):
        self.words = frozenset(w.strip().lower() for w in words if w and w.strip())

    def find_profanity(self, text: str) -> list[str]:
        lowered = (text or "").lower()
        return sorted(w for w in self.words if w in lowered)

    def contains_profanity(self, text: str) -> bool:
        lowered = (text or "").lower()
        return any(w in lowered for w in self.words)


def default_filter() -> ProfanityFilter:
    return ProfanityFilter(settings.profanity_words)
