"""In-memory document store: an ordered list scanned linearly on every call"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterator
from uuid import uuid4

from docstore.config import Settings
from docstore.store.filters import AuthorPredicate, any_author, build_filters, matches_all, same_author_id
from docstore.store.models import Document, SearchRequest
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass
class MemoryRepo(DocumentRepo):
    """Holds documents by reference in insertion order.

    Not safe for concurrent mutation; callers sharing a repo across threads
    must guard it themselves.
    """
    author_matches: AuthorPredicate = any_author
    clock: Callable[[], datetime] = _utcnow
    _docs: list[Document] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> "MemoryRepo":
        return cls(author_matches=same_author_id if settings.match_author_id else any_author)

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._docs))

    def _find_duplicate(self, document: Document) -> Document | None:
        """Return the first stored document with compatible author and identical content."""
        for stored in self._docs:
            if self.author_matches(stored.author, document.author) and stored.content == document.content:
                return stored
        return None

    def save(self, document: Document | None) -> Document | None:
        """Upsert document.

        A stored document with the same content (and a compatible author) is
        updated in place: it takes the incoming id and title, keeps its own
        content, author and created, and is returned instead of the input.
        Otherwise the input is stamped with the current time and appended.
        A missing or blank id is replaced by a fresh UUID either way.
        """
        if document is None:
            return None

        existing = self._find_duplicate(document)

        if _is_blank(document.id):
            document.id = str(uuid4())

        if existing is not None:
            existing.id = document.id
            existing.title = document.title
            logger.debug("Merged document %s into existing record", existing.id)
            return existing

        document.created = self.clock()
        self._docs.append(document)
        logger.debug("Inserted document %s (%d stored)", document.id, len(self._docs))
        return document

    def search(self, request: SearchRequest | None) -> list[Document]:
        if request is None:
            return []
        filters = build_filters(request)
        results = [doc for doc in self._docs if matches_all(doc, filters)]
        logger.debug("Search matched %d of %d documents", len(results), len(self._docs))
        return results

    def find_by_id(self, doc_id: str | None) -> Document | None:
        """Return the first document whose id equals doc_id exactly, or None."""
        if _is_blank(doc_id):
            return None
        return next((doc for doc in self._docs if doc.id == doc_id), None)
