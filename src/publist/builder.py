"""Regeneration of the publication list from the publication table."""
from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from publist.errors import OutputIOError
from publist.ingest.csv_loader import load_publications_csv
from publist.ingest.models import PublicationBatch, RankedPublication
from publist.processing.ordering import rank_publications
from publist.render.front_matter import generated_file_pattern, output_filename, render_front_matter

logger = logging.getLogger(__name__)

# rendered pages live in directories named after the generated file, e.g. "3_2021_taylor_semantic"
RENDERED_DIR_PATTERN = re.compile(r"\d_\d{4}")


@dataclass
class BuildReport:
    """Outcome of a single build."""

    removed: List[Path] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    record_count: int = 0


class PublicationListBuilder:
    """Turns the publication table into one front-matter file per publication."""

    def __init__(self, self_author_prefix: str, file_extension: str = "md") -> None:
        self.self_author_prefix = self_author_prefix
        self.file_extension = file_extension
        self._pattern = generated_file_pattern(file_extension)

    def build(self, input_path: Path, output_dir: Path, rendered_dir: Optional[Path] = None) -> BuildReport:
        """Purge stale output, then load, rank and emit every publication."""
        input_path = Path(input_path)
        output_dir = Path(output_dir)
        logger.info("Generating publications list from %s", input_path)

        report = BuildReport()
        if rendered_dir is not None:
            report.removed.extend(self.purge_rendered(Path(rendered_dir)))
        report.removed.extend(self.purge(output_dir))

        batch = load_publications_csv(input_path)
        ranked = rank_publications(batch.iter_records(), self.self_author_prefix)
        report.written.extend(self.emit(ranked, batch, output_dir))
        report.record_count = len(ranked)

        logger.info(
            "Finished generating publications list: %d removed, %d written",
            len(report.removed),
            len(report.written),
        )
        return report

    def is_generated_file(self, path: Path) -> bool:
        return bool(self._pattern.match(path.name))

    def purge(self, output_dir: Path) -> List[Path]:
        """Delete previously generated files, leaving anything else in place."""
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            candidates = sorted(p for p in output_dir.iterdir() if p.is_file() and self.is_generated_file(p))
        except OSError as exc:
            raise OutputIOError(f"Cannot list output directory {output_dir}: {exc}", output_dir) from exc

        removed: List[Path] = []
        for path in candidates:
            try:
                path.unlink()
            except OSError as exc:
                raise OutputIOError(f"Cannot remove stale publication file {path}: {exc}", path) from exc
            logger.debug("Removed %s", path)
            removed.append(path)
        logger.info("Removed %d stale publication files from %s", len(removed), output_dir)
        return removed

    def purge_rendered(self, rendered_dir: Path) -> List[Path]:
        """Delete rendered publication pages left over from a previous site build."""
        if not rendered_dir.is_dir():
            return []

        removed: List[Path] = []
        for path in sorted(rendered_dir.iterdir()):
            if not RENDERED_DIR_PATTERN.search(path.name):
                continue
            try:
                if path.is_dir():
                    shutil.rmtree(path)
                else:
                    path.unlink()
            except OSError as exc:
                raise OutputIOError(f"Cannot remove rendered publication {path}: {exc}", path) from exc
            logger.debug("Removed rendered %s", path)
            removed.append(path)
        return removed

    def emit(self, ranked: List[RankedPublication], batch: PublicationBatch, output_dir: Path) -> List[Path]:
        written: List[Path] = []
        for publication in ranked:
            path = output_dir / output_filename(publication, self.file_extension)
            text = render_front_matter(publication, batch.columns)
            try:
                with path.open("w", encoding="utf-8", newline="\n") as handle:
                    handle.write(text)
            except OSError as exc:
                raise OutputIOError(f"Cannot write publication file {path}: {exc}", path) from exc
            logger.debug("Wrote %s", path)
            written.append(path)
        logger.info("Wrote %d publication files to %s", len(written), output_dir)
        return written


def build_publication_list(
    input_path: Path,
    output_dir: Path,
    self_author_prefix: str,
    rendered_dir: Optional[Path] = None,
) -> BuildReport:
    """Convenience wrapper running a full build with default options."""
    builder = PublicationListBuilder(self_author_prefix=self_author_prefix)
    return builder.build(input_path, output_dir, rendered_dir=rendered_dir)
