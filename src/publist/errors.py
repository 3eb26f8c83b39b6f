"""Exceptions raised while building the publication list."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class PublicationListError(RuntimeError):
    """Base class for failures that abort a build."""


class ParseError(PublicationListError):
    """Raised when the publication table is missing or malformed."""


class OutputIOError(PublicationListError, OSError):
    """Raised when a generated file cannot be removed or written."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
