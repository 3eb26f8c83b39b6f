"""Display ordering for the publication list.

Records are ranked newest year first. Within a year, peer-reviewed work comes
before everything else, then work first-authored by the site owner, then the
remainder alphabetically by author string. Python's sort is stable, so rows
that tie on every key keep their order from the table.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from publist.ingest.models import PublicationRecord, RankedPublication


def is_first_author(record: PublicationRecord, self_author_prefix: str) -> bool:
    if not self_author_prefix:
        return False
    return (record.authors or "").startswith(self_author_prefix)


def sort_key(record: PublicationRecord, self_author_prefix: str) -> Tuple[int, bool, bool, str]:
    return (
        -record.year,
        not record.is_peer_reviewed,
        not is_first_author(record, self_author_prefix),
        record.authors or "",
    )


def sort_publications(records: Iterable[PublicationRecord], self_author_prefix: str) -> List[PublicationRecord]:
    return sorted(records, key=lambda record: sort_key(record, self_author_prefix))


def rank_publications(records: Iterable[PublicationRecord], self_author_prefix: str) -> List[RankedPublication]:
    """Sort records and attach weight, year heading and first-author flag.

    The input records are left untouched; a new list is returned.
    """
    ranked: List[RankedPublication] = []
    previous_year: Optional[int] = None
    for weight, record in enumerate(sort_publications(records, self_author_prefix), start=1):
        year_heading = record.year if weight == 1 or record.year != previous_year else None
        ranked.append(
            RankedPublication(
                record=record,
                is_first_author=is_first_author(record, self_author_prefix),
                weight=weight,
                year_heading=year_heading,
            )
        )
        previous_year = record.year
    return ranked
