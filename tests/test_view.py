"""Tests for the view state machine."""

import os

import pytest

from note_menu.config import MenuConfig
from note_menu.errors import InvalidPattern
from note_menu.view import CandidateSource, NoteMenu, ViewStatus

from conftest import MEETING, PERSONAL


@pytest.fixture
def menu(notes_dir, opener):
    return NoteMenu(str(notes_dir), MenuConfig(opener=opener))


def names(rows):
    return [os.path.basename(r.path) for r in rows]


def test_starts_uninitialized(menu):
    assert menu.status is ViewStatus.UNINITIALIZED
    assert menu.query is None
    assert menu.rows() == []


def test_populate_lists_all_notes_newest_first(menu):
    rows = menu.populate()
    assert menu.status is ViewStatus.POPULATED
    assert names(rows) == [PERSONAL, MEETING]


def test_ascending_order(notes_dir, opener):
    menu = NoteMenu(str(notes_dir), MenuConfig(opener=opener, descending=False))
    assert names(menu.populate()) == [MEETING, PERSONAL]


def test_toggle_sort(menu):
    menu.populate()
    assert menu.toggle_sort() is False
    assert names(menu.rows()) == [MEETING, PERSONAL]


def test_example_narrowing_and_reset(menu):
    assert len(menu.populate()) == 2

    menu.filter("work")
    assert menu.status is ViewStatus.NARROWED
    assert names(menu.rows()) == [MEETING]

    menu.filter("personal")
    assert menu.rows() == []

    menu.reset()
    assert menu.status is ViewStatus.UNINITIALIZED
    menu.update()
    assert len(menu.rows()) == 2


def test_filter_from_uninitialized_uses_full_directory(menu):
    menu.filter("personal")
    assert menu.status is ViewStatus.POPULATED
    assert names(menu.rows()) == [PERSONAL]


def test_default_pattern_is_idempotent(menu):
    first = menu.populate()
    menu.filter("")
    assert menu.status is ViewStatus.NARROWED
    assert menu.rows() == first


def test_narrowing_is_intersective(notes_dir, opener):
    (notes_dir / "20230301T080000--work-log__work.txt").write_text("", encoding="utf-8")
    narrowed = NoteMenu(str(notes_dir), MenuConfig(opener=opener))
    narrowed.populate()
    narrowed.filter("work")
    narrowed.filter("urgent")

    combined = NoteMenu(str(notes_dir), MenuConfig(opener=opener))
    combined.populate()
    combined.filter("(?=.*work)(?=.*urgent)")

    assert narrowed.rows() == combined.rows()
    assert names(narrowed.rows()) == [MEETING]


def test_reset_is_idempotent(menu):
    baseline = menu.populate()
    for pattern in ("work", "urgent", "meeting"):
        menu.filter(pattern)
    menu.reset()
    menu.reset()
    assert menu.pattern == ""
    assert menu.status is ViewStatus.UNINITIALIZED
    menu.update()
    assert menu.rows() == baseline


def test_reset_restores_configured_default(notes_dir, opener):
    menu = NoteMenu(str(notes_dir), MenuConfig(opener=opener, default_pattern="personal"))
    assert names(menu.populate()) == [PERSONAL]
    menu.filter("nothing-matches")
    assert menu.rows() == []
    menu.reset()
    assert menu.pattern == "personal"
    menu.update()
    assert names(menu.rows()) == [PERSONAL]


def test_invalid_default_pattern_is_rejected(notes_dir):
    with pytest.raises(InvalidPattern):
        NoteMenu(str(notes_dir), MenuConfig(default_pattern="["))


def test_rows_are_resolved_lazily(menu):
    menu.update()
    menu.pattern = "work"
    assert names(menu.rows()) == [MEETING]


def test_full_query_rereads_directory(menu, notes_dir):
    menu.populate()
    (notes_dir / "20230401T100000--new.txt").write_text("", encoding="utf-8")
    assert len(menu.rows()) == 3


def test_narrowed_query_uses_frozen_snapshot(menu, notes_dir):
    menu.populate()
    menu.filter("")
    assert menu.query.source is CandidateSource.PREVIOUS_ROWS
    (notes_dir / "20230401T100000--new.txt").write_text("", encoding="utf-8")
    assert len(menu.rows()) == 2
    assert len(menu.query.snapshot) == 2


def test_invalid_pattern_leaves_state_untouched(menu):
    menu.populate()
    menu.filter("work")
    query, pattern = menu.query, menu.pattern
    with pytest.raises(InvalidPattern):
        menu.filter("(unclosed")
    assert menu.query is query
    assert menu.pattern == pattern
    assert names(menu.rows()) == [MEETING]


def test_keyword_filter_example(menu):
    menu.populate()
    assert menu.filter_by_keywords({"urgent"}) is True
    assert menu.pattern == "_urgent"
    assert names(menu.rows()) == [MEETING]


def test_empty_keyword_selection_is_noop(menu):
    menu.populate()
    query = menu.query
    assert menu.filter_by_keywords([]) is False
    assert menu.filter_out_keywords([]) is False
    assert menu.query is query
    assert menu.status is ViewStatus.POPULATED
    assert len(menu.rows()) == 2


def test_filter_out_keywords(menu):
    menu.populate()
    assert menu.filter_out_keywords(["urgent"]) is True
    assert names(menu.rows()) == [PERSONAL]


def test_keywords_in_view(menu):
    menu.populate()
    assert menu.keywords() == ["personal", "urgent", "work"]
    menu.filter("work")
    assert menu.keywords() == ["urgent", "work"]


def test_malformed_files_are_reported(menu, notes_dir):
    (notes_dir / "20231340T000000--bad.txt").write_text("", encoding="utf-8")
    rows = menu.populate()
    assert len(rows) == 2
    assert [f.name for f in menu.failures] == ["20231340T000000--bad.txt"]


def test_export_hands_filenames_to_marker(menu, notes_dir):
    menu.populate()
    menu.filter("work")
    received = []
    exported = menu.export(lambda directory, filenames: received.append((directory, list(filenames))))
    assert exported == [MEETING]
    assert received == [(str(notes_dir), [MEETING])]


def test_recursive_listing(notes_dir, opener):
    sub = notes_dir / "archive"
    sub.mkdir()
    (sub / "20220101T000000--old.txt").write_text("", encoding="utf-8")
    flat = NoteMenu(str(notes_dir), MenuConfig(opener=opener))
    assert len(flat.populate()) == 2
    deep = NoteMenu(str(notes_dir), MenuConfig(opener=opener, recursive=True))
    assert len(deep.populate()) == 3
    assert os.path.join("archive", "20220101T000000--old.txt") in deep.filenames()


def test_custom_lister(opener):
    calls = []

    def lister(directory, recursive):
        calls.append((directory, recursive))
        return [os.path.join(directory, MEETING)]

    menu = NoteMenu("/virtual", MenuConfig(opener=opener, lister=lister))
    assert names(menu.populate()) == [MEETING]
    assert calls == [("/virtual", False)]


def test_activate_uses_configured_opener(menu, opener):
    row = menu.populate()[0]
    row.activate()
    menu.activate(row.path)
    assert opener.paths == [row.path, row.path]


def test_dotted_title_keywords_are_offered(menu, notes_dir):
    (notes_dir / "20230501T100000--v1.2-notes__release.txt").write_text("", encoding="utf-8")
    menu.populate()
    assert "release" in menu.keywords()
    assert menu.filter_by_keywords(["release"])
    assert [r.keywords.plain for r in menu.rows()] == ["release"]
