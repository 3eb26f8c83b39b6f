"""Command line entry point for regenerating the publication list."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from publist.builder import PublicationListBuilder
from publist.config import get_settings
from publist.errors import PublicationListError

app = typer.Typer(help="Regenerate publication front-matter files from the publication CSV")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


@app.command()
def build(
    input_csv: Optional[Path] = typer.Option(None, "--input", help="Publication CSV (defaults to configured path)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for generated files"),
    rendered_dir: Optional[Path] = typer.Option(None, "--rendered-dir", help="Rendered site pages to clear"),
    self_author: Optional[str] = typer.Option(None, "--self-author", help="Author prefix marking first authorship"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every removed and written file"),
) -> None:
    """Rebuild the publication list."""
    configure_logging(verbose)
    settings = get_settings()

    builder = PublicationListBuilder(
        self_author_prefix=self_author if self_author is not None else settings.self_author_prefix,
        file_extension=settings.file_extension,
    )
    try:
        report = builder.build(
            input_csv or settings.input_csv,
            output_dir or settings.output_dir,
            rendered_dir=rendered_dir or settings.rendered_dir,
        )
    except PublicationListError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"Generated {len(report.written)} publication files ({len(report.removed)} stale files removed).",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":  # pragma: no cover
    app()
