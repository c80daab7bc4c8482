"""Tests for the note-menu command line."""

from click.testing import CliRunner

from note_menu.cli import main

from conftest import MEETING, PERSONAL


def run(*args, **kwargs):
    return CliRunner().invoke(main, [str(a) for a in args], **kwargs)


def test_export_lists_all_notes(notes_dir):
    result = run(notes_dir, "--export")
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [PERSONAL, MEETING]


def test_export_ascending(notes_dir):
    result = run(notes_dir, "--export", "--ascending")
    assert result.output.splitlines() == [MEETING, PERSONAL]


def test_export_with_filter_and_keywords(notes_dir):
    assert run(notes_dir, "--export", "--filter", "2023").output.splitlines() == [PERSONAL, MEETING]
    assert run(notes_dir, "--export", "--keyword", "urgent").output.splitlines() == [MEETING]
    assert run(notes_dir, "--export", "--filter", "work", "--keyword", "personal").output == ""


def test_filter_from_environment(notes_dir):
    result = run(notes_dir, "--export", env={"NOTE_MENU_FILTER": "personal"})
    assert result.output.splitlines() == [PERSONAL]


def test_invalid_filter_is_usage_error(notes_dir):
    result = run(notes_dir, "--export", "--filter", "(")
    assert result.exit_code == 2
    assert "--filter" in result.output


def test_print_table(notes_dir):
    result = run(notes_dir, "--print")
    assert result.exit_code == 0, result.output
    assert "2023-01-01 09:00" in result.output
    assert "meeting-notes" in result.output
    assert "(No Title)" in result.output
    assert "README" not in result.output


def test_missing_directory(tmp_path):
    result = run(tmp_path / "absent", "--export")
    assert result.exit_code == 2
