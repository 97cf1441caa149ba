"""Shared fixtures for store unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.store.memory_repo import MemoryRepo
from docstore.store.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: each call returns a time one minute after the previous."""

    def __init__(self, start: datetime = T0):
        self.now = start - timedelta(minutes=1)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="repo")
def repo_fixture(clock):
    """Empty repo with the default (always-true) author predicate and a stepping clock."""
    return MemoryRepo(clock=clock)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for unsaved documents."""
    def _make(title="Report A", content="alpha", author_id="a1", doc_id=None, created=None):
        return Document(id=doc_id, title=title, content=content,
                        author=Author(id=author_id, name=f"Author {author_id}"), created=created)
    return _make
