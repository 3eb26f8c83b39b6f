"""Regenerate the publication list using the configured paths."""
from __future__ import annotations

from publist.cli import app

if __name__ == "__main__":  # pragma: no cover
    app()
