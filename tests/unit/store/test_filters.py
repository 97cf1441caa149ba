"""Unit tests for store/filters.py"""

from datetime import datetime, timedelta, timezone

from docstore.store.filters import (
    any_author, build_filters, contains_content_filter, created_after_filter,
    created_before_filter, matches_all, same_author_id, title_prefix_filter,
)
from docstore.store.models import Author, Document, SearchRequest


T = datetime(2024, 5, 1, tzinfo=timezone.utc)


def _doc(title="Quarterly Report", content="revenue grew", author_id="a1", created=T) -> Document:
    return Document(id="d1", title=title, content=content, author=Author(id=author_id), created=created)


# --- author predicates ---

def test_any_author_accepts_different_authors():
    assert any_author(Author(id="a"), Author(id="b"))


def test_same_author_id_compares_ids_only():
    assert same_author_id(Author(id="a", name="x"), Author(id="a", name="y"))
    assert not same_author_id(Author(id="a"), Author(id="b"))


# --- single filters ---

def test_title_prefix_filter_any_prefix():
    f = title_prefix_filter(["Annual", "Quart"])
    assert f(_doc())
    assert not f(_doc(title="Monthly"))


def test_title_prefix_filter_is_case_sensitive():
    assert not title_prefix_filter(["quart"])(_doc())


def test_contains_content_filter_substring():
    f = contains_content_filter(["loss", "grew"])
    assert f(_doc())
    assert not f(_doc(content="flat year"))


def test_created_bounds_exclude_equal_timestamp():
    assert not created_after_filter(T)(_doc())
    assert not created_before_filter(T)(_doc())
    assert created_after_filter(T - timedelta(seconds=1))(_doc())
    assert created_before_filter(T + timedelta(seconds=1))(_doc())


def test_created_bounds_reject_unstamped_document():
    assert not created_after_filter(T)(_doc(created=None))


# --- build_filters / matches_all ---

def test_build_filters_empty_request_has_no_filters():
    assert build_filters(SearchRequest()) == []
    assert matches_all(_doc(), [])


def test_build_filters_empty_lists_are_unconstrained():
    request = SearchRequest(title_prefixes=[], contains_contents=[], author_ids=[])
    assert build_filters(request) == []


def test_build_filters_one_per_constrained_field():
    request = SearchRequest(
        title_prefixes=["Q"], contains_contents=["rev"], author_ids=["a1"],
        created_from=T - timedelta(days=1), created_to=T + timedelta(days=1),
    )
    filters = build_filters(request)
    assert len(filters) == 5
    assert matches_all(_doc(), filters)


def test_matches_all_requires_every_filter():
    filters = build_filters(SearchRequest(title_prefixes=["Q"], author_ids=["someone-else"]))
    assert not matches_all(_doc(), filters)
