from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Tuple

from rich.text import Text

from .debug import get_logger
from .errors import MalformedFilename
from .identifier import parse_filename, render_date, render_keywords, render_title


log = get_logger("entries")

Action = Callable[[str], None]


@dataclass(frozen=True)
class DisplayRow:
    """One rendered table row for a note file.

    The identifier doubles as the sort key and is bound to ``action``, which
    runs with the row's path when the row is activated.
    """

    identifier: str
    date: str
    title: Text
    keywords: Text
    path: str
    action: Action = field(compare=False, repr=False)

    def cells(self) -> Tuple[str, Text, Text]:
        return (self.date, self.title, self.keywords)

    def activate(self) -> None:
        self.action(self.path)


def build_row(path: str, action: Action) -> DisplayRow:
    """Build the display row for ``path`` from its filename alone."""
    note = parse_filename(path)
    return DisplayRow(
        identifier=note.identifier,
        date=render_date(note),
        title=render_title(note),
        keywords=render_keywords(note),
        path=path,
        action=action,
    )


def build_rows(paths: Iterable[str], action: Action) -> Tuple[List[DisplayRow], List[MalformedFilename]]:
    """Build a row per path; a malformed name fails only its own row.

    Returns the rows that were built and the failures, in input order.
    """
    rows: List[DisplayRow] = []
    failures: List[MalformedFilename] = []
    for path in paths:
        try:
            rows.append(build_row(path, action))
        except MalformedFilename as exc:
            log.warning("skipping row: %s", exc)
            failures.append(exc)
    return rows, failures


def sort_rows(rows: Iterable[DisplayRow], descending: bool = True) -> List[DisplayRow]:
    # Identifiers are fixed-width timestamps; ties fall back to the path
    return sorted(rows, key=lambda r: (r.identifier, r.path), reverse=descending)
