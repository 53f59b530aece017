import pytest

from review_widget.core.config import Settings
from review_widget.services.profanity import ProfanityFilter, default_filter


@pytest.mark.parametrize("text", ["What a CRAP experience", "total moron design", "Idiotic checkout"])
def test_default_filter_blocks(text):
    assert default_filter().contains_profanity(text)


@pytest.mark.parametrize("text", ["Great app, love it!", "", "Works fine on my phone"])
def test_default_filter_allows(text):
    assert not default_filter().contains_profanity(text)


def test_find_profanity_lists_matches():
    gate = ProfanityFilter(["darn", "heck"])
    assert gate.find_profanity("Darn it, what the HECK") == ["darn", "heck"]
    assert gate.find_profanity("all good") == []


def test_substring_matching_is_naive():
    # "hell" inside "hello" still counts
    assert ProfanityFilter(["hell"]).contains_profanity("Hello there")


def test_empty_denylist():
    gate = ProfanityFilter(["", "  "])
    assert gate.words == frozenset()
    assert not gate.contains_profanity("anything at all")


def test_denylist_from_settings():
    custom = Settings(PROFANITY_WORDS=" Foo, bar ,,BAZ")
    assert custom.profanity_words == ["foo", "bar", "baz"]
    assert ProfanityFilter(custom.profanity_words).contains_profanity("such FOOlishness")


def test_log_level_follows_environment():
    assert Settings(ENVIRONMENT="production").log_level == "INFO"
    assert Settings(ENVIRONMENT="development").log_level == "DEBUG"
    assert Settings(ENVIRONMENT="production", LOG_LEVEL="warning").log_level == "WARNING"
