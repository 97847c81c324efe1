import pytest

from issue_search.query import SearchQuery, build_search_query
from issue_search.text import MAX_KEYWORDS, STOP_WORDS, extract_keywords, normalize_text, tokenize


def test_normalize_text_lowercases_and_strips_punctuation() -> None:
    assert normalize_text("Crash! On *Upload*, v2.0") == "crash on upload v20"


def test_normalize_text_keeps_underscores_and_unicode_letters() -> None:
    assert normalize_text("snake_case Überprüfung") == "snake_case überprüfung"


def test_tokenize_drops_empty_tokens() -> None:
    assert tokenize("   leading   and trailing  ") == ["leading", "and", "trailing"]
    assert tokenize("  !!! ") == []


def test_extract_keywords_filters_short_words_and_stop_words() -> None:
    keywords = extract_keywords("The app crashes when uploading large files with this build")
    assert keywords == ["crashes", "when", "uploading", "large", "files", "build"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "a an the and",
        "one two three four five six seven eight nine ten eleven twelve thirteen fourteen",
        "That this with, THE and; that!! This?? with...",
        "word " * 50,
    ],
)
def test_extract_keywords_bounds(text: str) -> None:
    keywords = extract_keywords(text)
    assert len(keywords) <= MAX_KEYWORDS
    assert all(len(word) > 3 for word in keywords)
    assert not STOP_WORDS.intersection(keywords)


def test_extract_keywords_keeps_original_order_and_first_ten() -> None:
    text = " ".join(f"token{i:02d}" for i in range(15))
    assert extract_keywords(text) == [f"token{i:02d}" for i in range(10)]


def test_build_search_query_scopes_to_repository() -> None:
    query = build_search_query("octo", "widgets", "Login page throws error after upgrade")

    assert query.q == "repo:octo/widgets login page throws error after upgrade"
    assert query.as_params() == {
        "q": "repo:octo/widgets login page throws error after upgrade",
        "sort": "updated",
        "order": "desc",
        "per_page": "30",
    }


def test_build_search_query_without_keywords_is_repository_only() -> None:
    assert build_search_query("octo", "widgets", "").q == "repo:octo/widgets"
    assert build_search_query("octo", "widgets", "it is the bug!").q == "repo:octo/widgets"


def test_search_query_defaults() -> None:
    query = SearchQuery(q="repo:a/b")
    assert (query.sort, query.order, query.per_page) == ("updated", "desc", 30)


def test_extract_keywords_keeps_repeated_words() -> None:
    assert extract_keywords("upload upload fails upload") == ["upload", "upload", "fails", "upload"]
