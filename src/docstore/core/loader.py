"""Read documents from YAML/JSON files and save them into a repo"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from docstore.store.models import Document
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}


def _parse(path: Path) -> Any:
    """Return the raw parsed content of path; JSON by suffix, YAML otherwise."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in JSON_SUFFIXES:
        return json.loads(text)
    return yaml.safe_load(text)


def read_documents(path: str | Path) -> list[Document]:
    """Parse path into Document models.

    The file holds either a list of document mappings or a mapping with a
    'documents' list. An empty file yields no documents.
    """
    path = Path(path)
    try:
        raw = _parse(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid documents file {path}: {e}") from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("documents")
    if not isinstance(raw, list):
        raise ValueError(f"Invalid documents file {path}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid documents file {path}: {e}") from e


def load_into(repo: DocumentRepo, documents: Iterable[Document]) -> dict[str, int]:
    """Save documents in order; count inserts vs merges into existing records."""
    counts = {"created": 0, "merged": 0}
    for doc in documents:
        saved = repo.save(doc)
        counts["created" if saved is doc else "merged"] += 1
    logger.debug("Loaded documents: %s", counts)
    return counts
