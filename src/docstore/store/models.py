"""Document, author and search request models held and queried by the store"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: datetime | None) -> datetime | None:
    """Interpret naive datetimes as UTC so every stored timestamp is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Identifying metadata attached to a document; ids are not required to be unique"""
    id: str
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record. id and created stay None until the store assigns them."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class SearchRequest(BaseModel):
    """Independently composable filter criteria; any field left as None is unconstrained."""
    model_config = ConfigDict(populate_by_name=True)

    title_prefixes:    Optional[list[str]] = Field(default=None, alias="titlePrefixes")
    contains_contents: Optional[list[str]] = Field(default=None, alias="containsContents")
    author_ids:        Optional[list[str]] = Field(default=None, alias="authorIds")
    created_from:      Optional[datetime]  = Field(default=None, alias="createdFrom",
                                                   description="Exclusive lower bound on created")
    created_to:        Optional[datetime]  = Field(default=None, alias="createdTo",
                                                   description="Exclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)
