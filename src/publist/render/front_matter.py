"""Rendering of ranked publications as site-generator front matter."""
from __future__ import annotations

import re
from typing import Any, List, Sequence

from publist.ingest.models import RankedPublication
from publist.processing.text import normalize_title, publication_filename

FRONT_MATTER_MARKER = "---"
DERIVED_FIELDS = ("is_first_author", "year_heading", "weight")


def quote_value(value: Any) -> str:
    """Render a value as a single-quoted YAML scalar."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    text = str(value).replace("'", "''")
    return f"'{text}'"


def render_front_matter(publication: RankedPublication, columns: Sequence[str]) -> str:
    """Render one publication as a delimited block of ``key: 'value'`` lines.

    Table columns come first in table order, null cells omitted (an empty
    title is still written), followed by the derived fields. ``weight`` is
    written unquoted as the site generator sorts on it numerically.
    """
    record = publication.record
    lines: List[str] = [FRONT_MATTER_MARKER]
    for column in columns:
        if column in DERIVED_FIELDS:
            continue
        value = record.get_field(column)
        if column == "title":
            value = normalize_title(value)
        if value is None:
            continue
        lines.append(f"{column}: {quote_value(value)}")

    lines.append(f"is_first_author: {quote_value(publication.is_first_author)}")
    if publication.year_heading is not None:
        lines.append(f"year_heading: {quote_value(publication.year_heading)}")
    lines.append(f"weight: {publication.weight}")
    lines.append(FRONT_MATTER_MARKER)
    return "\n".join(lines) + "\n"


def output_filename(publication: RankedPublication, extension: str = "md") -> str:
    record = publication.record
    return publication_filename(publication.weight, record.year, record.authors, record.title, extension)


def generated_file_pattern(extension: str = "md") -> re.Pattern[str]:
    """Pattern matching every filename :func:`output_filename` can produce."""
    return re.compile(rf"^\d+_\d+_.*_[a-z0-9]+\.{re.escape(extension)}$")
