from __future__ import annotations

from pathlib import Path

import pytest

from publist.config import get_settings

PUBS_CSV = """authors,title,year,journal,doi,preprint,peer_reviewed_article
"Smith, A., Taylor, J.",Another one,2020,,,https://psyarxiv.com/abc,
"Taylor, J., Smith, A.",A study,2020,Cortex,10.1/xyz,,x
"Brown, B., Taylor, J.",Older work?,2018,Memory,,,x
"Taylor, J.",,2019,,,https://osf.io/q,
"Adams, C., Taylor, J.",Peer reviewed too,2020,Brain,,,x
"""


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("INPUT_CSV", "OUTPUT_DIR", "RENDERED_DIR", "SELF_AUTHOR_PREFIX", "FILE_EXTENSION"):
        monkeypatch.delenv(f"PUBLIST_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pubs_csv(tmp_path) -> Path:
    path = tmp_path / "pubs.csv"
    path.write_text(PUBS_CSV, encoding="utf-8")
    return path
