"""Data models for ingestion layer."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

PEER_REVIEW_FIELDS = ("peer_reviewed_article", "peer_reviewed_paper")


class PublicationRecord(BaseModel):
    """One row of the publication table.

    Columns without a declared field (preprint, osf, github, ...) are kept as
    extra attributes so every column of the table survives to the output.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    authors: Optional[str] = None
    title: Optional[str] = None
    year: int
    journal: Optional[str] = None
    doi: Optional[str] = None
    peer_reviewed_article: Optional[str] = None
    peer_reviewed_paper: Optional[str] = None

    def get_field(self, name: str) -> Any:
        """Return the value stored for a table column, declared or extra."""
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)

    @property
    def is_peer_reviewed(self) -> bool:
        return any(self.get_field(name) is not None for name in PEER_REVIEW_FIELDS)


class RankedPublication(BaseModel):
    """A record together with the fields derived from its place in the list."""

    model_config = ConfigDict(frozen=True)

    record: PublicationRecord
    is_first_author: bool
    weight: int = Field(..., ge=1)
    year_heading: Optional[int] = None


class PublicationBatch(BaseModel):
    """Container for loaded records along with provenance metadata."""

    source_path: Path
    columns: List[str]
    records: List[PublicationRecord] = Field(default_factory=list)

    def iter_records(self) -> Iterable[PublicationRecord]:
        return iter(self.records)
