"""Search predicates over stored documents and dedup author predicates"""

from datetime import datetime
from typing import Callable, Iterable

from docstore.store.models import Author, Document, SearchRequest


DocFilter = Callable[[Document], bool]
AuthorPredicate = Callable[[Author, Author], bool]


# --- dedup author predicates ---

def any_author(stored: Author, incoming: Author) -> bool:
    """Treat every pair of authors as compatible; dedup then rests on content alone."""
    return True


def same_author_id(stored: Author, incoming: Author) -> bool:
    """Require the stored and incoming authors to share an id."""
    return stored.id == incoming.id


# --- search filters ---

def title_prefix_filter(prefixes: list[str]) -> DocFilter:
    return lambda doc: any(doc.title.startswith(p) for p in prefixes)


def contains_content_filter(parts: list[str]) -> DocFilter:
    return lambda doc: any(part in doc.content for part in parts)


def author_id_filter(author_ids: list[str]) -> DocFilter:
    return lambda doc: any(doc.author.id == a for a in author_ids)


def created_after_filter(bound: datetime) -> DocFilter:
    """Strict: a document created exactly at bound is excluded."""
    return lambda doc: doc.created is not None and doc.created > bound


def created_before_filter(bound: datetime) -> DocFilter:
    """Strict: a document created exactly at bound is excluded."""
    return lambda doc: doc.created is not None and doc.created < bound


def build_filters(request: SearchRequest) -> list[DocFilter]:
    """Return one filter per constrained field of request.

    None and empty lists leave their field unconstrained, so an all-empty
    request yields no filters and matches every document.
    """
    filters: list[DocFilter] = []
    if request.title_prefixes:
        filters.append(title_prefix_filter(request.title_prefixes))
    if request.contains_contents:
        filters.append(contains_content_filter(request.contains_contents))
    if request.author_ids:
        filters.append(author_id_filter(request.author_ids))
    if request.created_from is not None:
        filters.append(created_after_filter(request.created_from))
    if request.created_to is not None:
        filters.append(created_before_filter(request.created_to))
    return filters


def matches_all(doc: Document, filters: Iterable[DocFilter]) -> bool:
    """AND across filters; an empty filter set matches."""
    return all(f(doc) for f in filters)
