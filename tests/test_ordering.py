from publist.ingest.models import PublicationRecord
from publist.processing.ordering import is_first_author, rank_publications, sort_publications


def _record(authors, year, peer=None, title="Title", **extra):
    return PublicationRecord(authors=authors, title=title, year=year, peer_reviewed_article=peer, **extra)


def test_is_first_author_uses_prefix():
    assert is_first_author(_record("Taylor, J.", 2020), "Taylor")
    assert not is_first_author(_record("Smith, A., Taylor, J.", 2020), "Taylor")
    assert not is_first_author(_record("taylor, j.", 2020), "Taylor")
    assert not is_first_author(_record(None, 2020), "Taylor")


def test_scenario_peer_reviewed_first_author_comes_first():
    smith = _record("Smith, A.", 2020, title="Another one")
    taylor = _record("Taylor, J.", 2020, peer="x", title="A study")

    ranked = rank_publications([smith, taylor], "Taylor")

    assert [p.record.authors for p in ranked] == ["Taylor, J.", "Smith, A."]
    assert [p.weight for p in ranked] == [1, 2]
    assert ranked[0].year_heading == 2020
    assert ranked[1].year_heading is None
    assert ranked[0].is_first_author is True
    assert ranked[1].is_first_author is False


def test_year_descending_beats_everything_else():
    old = _record("Taylor, J.", 2018, peer="x")
    new = _record("Zed, Z.", 2021)
    assert sort_publications([old, new], "Taylor") == [new, old]


def test_first_author_then_alphabetical_tie_breaks():
    records = [
        _record("Young, Y.", 2020, peer="x"),
        _record("Adams, A.", 2020, peer="x"),
        _record("Taylor, J.", 2020, peer="x"),
    ]
    ordered = sort_publications(records, "Taylor")
    assert [r.authors for r in ordered] == ["Taylor, J.", "Adams, A.", "Young, Y."]


def test_legacy_peer_reviewed_paper_column_counts_as_marker():
    plain = _record("Adams, A.", 2020)
    legacy = PublicationRecord(authors="Young, Y.", year=2020, peer_reviewed_paper="yes")
    assert sort_publications([plain, legacy], "Taylor") == [legacy, plain]


def test_full_ties_keep_input_order():
    first = _record("Adams, A.", 2020, title="First")
    second = _record("Adams, A.", 2020, title="Second")
    ordered = sort_publications([first, second], "Taylor")
    assert [r.title for r in ordered] == ["First", "Second"]


def test_weights_are_a_permutation_and_headings_mark_year_changes():
    records = [
        _record("A", 2019),
        _record("B", 2021),
        _record("C", 2019),
        _record("D", 2020),
        _record("E", 2021),
    ]
    ranked = rank_publications(records, "Taylor")

    assert sorted(p.weight for p in ranked) == list(range(1, len(records) + 1))
    for previous, current in zip([None] + ranked[:-1], ranked):
        if previous is None or previous.record.year != current.record.year:
            assert current.year_heading == current.record.year
        else:
            assert current.year_heading is None
    assert [p.year_heading for p in ranked] == [2021, None, 2020, 2019, None]


def test_rank_does_not_mutate_records():
    record = _record("Taylor, J.", 2020)
    rank_publications([record], "Taylor")
    assert record.model_dump(exclude_none=True) == {"authors": "Taylor, J.", "title": "Title", "year": 2020}
