"""Text helpers for titles, author lists and generated filenames."""
from __future__ import annotations

import re
from typing import Optional

AUTHOR_SPLIT_PATTERN = re.compile(r"[, ]")
UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.'-]")
TITLE_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")
TERMINAL_PUNCTUATION = (".", "?", "!")
UNTITLED_WORD = "untitled"


def normalize_title(title: Optional[str]) -> str:
    """Return the title with a full stop appended unless it already ends a sentence."""
    if not title:
        return ""
    if title.endswith(TERMINAL_PUNCTUATION):
        return title
    return f"{title}."


def first_author_token(authors: Optional[str]) -> str:
    """Lowercased first comma/space separated token of an author list, e.g. the surname.

    Characters that cannot appear in a filename, such as path separators, are dropped.
    """
    for token in AUTHOR_SPLIT_PATTERN.split(authors or ""):
        token = UNSAFE_FILENAME_CHARS.sub("", token)
        if token:
            return token.lower()
    return ""


def first_title_word(title: Optional[str]) -> str:
    match = TITLE_WORD_PATTERN.search(title or "")
    if match is None:
        return UNTITLED_WORD
    return match.group(0).lower()


def publication_filename(weight: int, year: int, authors: Optional[str], title: Optional[str], extension: str = "md") -> str:
    return f"{weight}_{year}_{first_author_token(authors)}_{first_title_word(title)}.{extension}"
