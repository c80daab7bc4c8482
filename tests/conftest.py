import pytest


MEETING = "20230101T090000--meeting-notes__work_urgent.txt"
PERSONAL = "20230215T120000__personal.txt"


class RecordingOpener:
    """Opener double that remembers the paths it was asked to open."""

    def __init__(self):
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)


@pytest.fixture
def notes_dir(tmp_path):
    """Directory holding two notes and one file that is not a note."""
    for name in (MEETING, PERSONAL, "README.md"):
        (tmp_path / name).write_text("body\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def opener():
    return RecordingOpener()
