from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.store.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document | None) -> Document | None:
        """Upsert document; return the stored record, or None when given None."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        """Return stored documents matching every criterion of request, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str | None) -> Document | None:
        raise NotImplementedError
