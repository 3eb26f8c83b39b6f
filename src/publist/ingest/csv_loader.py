"""CSV ingestion utilities for the publication table."""
from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from publist.errors import ParseError

from .models import PublicationBatch, PublicationRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("authors", "year")


def _row_to_dict(row: pd.Series) -> Dict[str, Optional[str]]:
    return {str(column): (None if pd.isna(value) else str(value)) for column, value in row.items()}


def load_publications_csv(path: Path) -> PublicationBatch:
    """Load publications from CSV, one record per row, in file order.

    Only empty cells are treated as missing; every other cell is kept as the
    literal string found in the file.
    """
    path = Path(path)
    try:
        # index_col=False drops cells past the header with only a warning
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            with path.open("r", encoding="utf-8", newline="") as handle:
                df = pd.read_csv(
                    handle,
                    dtype=str,
                    keep_default_na=False,
                    na_values=[""],
                    index_col=False,
                )
    except FileNotFoundError as exc:
        raise ParseError(f"Publication table not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"Could not read publication table {path}: {exc}") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, pd.errors.ParserWarning) as exc:
        raise ParseError(f"Malformed publication table {path}: {exc}") from exc

    columns: List[str] = [str(c) for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise ParseError(f"Publication table {path} lacks required column(s): {', '.join(missing)}")

    records: List[PublicationRecord] = []
    for idx, row in df.iterrows():
        data = _row_to_dict(row)
        try:
            records.append(PublicationRecord(**data))
        except ValidationError as exc:
            # header is line 1, so data row idx sits on line idx + 2
            raise ParseError(f"Invalid publication on line {idx + 2} of {path}: {exc}") from exc

    logger.info("Loaded %d publications from %s", len(records), path)
    return PublicationBatch(source_path=path, columns=columns, records=records)
