from __future__ import annotations

import os
from enum import Enum
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .config import MenuConfig
from .debug import get_logger
from .entries import DisplayRow, build_rows, sort_rows
from .errors import MalformedFilename
from .filtering import (
    collect_keywords,
    compile_pattern,
    exclude_keywords_pattern,
    filter_paths,
    keyword_pattern,
)
from .utils import list_note_files


Marker = Callable[[str, Sequence[str]], None]


class ViewStatus(Enum):
    UNINITIALIZED = "uninitialized"
    POPULATED = "populated"
    NARROWED = "narrowed"


class CandidateSource(Enum):
    FULL_DIRECTORY = "full-directory"
    PREVIOUS_ROWS = "previous-rows"


class Query(NamedTuple):
    """Where the next render takes its candidate paths from.

    ``snapshot`` is only used by ``PREVIOUS_ROWS`` and is frozen when the
    query is installed. The pattern is not part of the query: it is read
    when the query is resolved.
    """
    source: CandidateSource
    snapshot: Tuple[str, ...] = ()


class NoteMenu:
    """Filter state and lazily resolved row set for one note directory.

    State machine:

    - no query installed: ``UNINITIALIZED``
    - ``update()`` from ``UNINITIALIZED`` installs a full-directory query
      (``POPULATED``)
    - ``update()`` with a query installed snapshots the paths of the rows
      currently displayed and installs a query over that snapshot
      (``NARROWED``); successive filters therefore intersect
    - ``reset()`` drops the query and restores the default pattern

    Rows are never cached: each call to :meth:`rows` resolves the installed
    query against the pattern in effect at that moment.
    """

    def __init__(self, directory: str, config: Optional[MenuConfig] = None) -> None:
        self.directory = directory
        self.config = config or MenuConfig()
        compile_pattern(self.config.default_pattern)
        self.pattern: str = self.config.default_pattern
        self.descending: bool = self.config.descending
        self.query: Optional[Query] = None
        self.failures: List[MalformedFilename] = []
        self.logr = get_logger("view")

    @property
    def status(self) -> ViewStatus:
        if self.query is None:
            return ViewStatus.UNINITIALIZED
        if self.query.source is CandidateSource.FULL_DIRECTORY:
            return ViewStatus.POPULATED
        return ViewStatus.NARROWED

    # ---- Resolution ----
    def list_directory(self) -> List[str]:
        lister = self.config.lister or list_note_files
        return list(lister(self.directory, self.config.recursive))

    def candidates(self) -> List[str]:
        """Candidate paths of the installed query (the full listing if none)."""
        if self.query is None or self.query.source is CandidateSource.FULL_DIRECTORY:
            return self.list_directory()
        return list(self.query.snapshot)

    def rows(self) -> List[DisplayRow]:
        """Resolve the installed query into sorted display rows.

        Rows whose filename turns out to be malformed are left out and
        recorded in :attr:`failures`.
        """
        if self.query is None:
            return []
        matching = filter_paths(self.candidates(), self.pattern)
        rows, failures = build_rows(matching, self.config.opener)
        self.failures = failures
        return sort_rows(rows, descending=self.descending)

    def paths(self) -> List[str]:
        return [r.path for r in self.rows()]

    # ---- Transitions ----
    def update(self) -> Query:
        if self.query is None:
            query = Query(CandidateSource.FULL_DIRECTORY)
        else:
            query = Query(CandidateSource.PREVIOUS_ROWS, tuple(self.paths()))
        self.logr.debug(
            "update: %s -> %s pattern=%r candidates=%d",
            self.status.value,
            query.source.value,
            self.pattern,
            len(query.snapshot),
        )
        self.query = query
        return query

    def populate(self) -> List[DisplayRow]:
        """Start from the full directory with the default pattern."""
        self.reset()
        self.update()
        return self.rows()

    def filter(self, pattern: str) -> Query:
        """Replace the pattern and narrow the current view with it.

        Raises :class:`InvalidPattern` without touching any state when the
        pattern does not compile.
        """
        compile_pattern(pattern)
        query = self.update()
        self.pattern = pattern
        self.logr.debug("filter: pattern=%r status=%s", pattern, self.status.value)
        return query

    def filter_by_keywords(self, keywords: Iterable[str]) -> bool:
        """Narrow to rows carrying any of ``keywords``. Empty selection is a no-op."""
        pattern = keyword_pattern(keywords)
        if not pattern:
            self.logr.debug("filter_by_keywords: empty selection")
            return False
        self.filter(pattern)
        return True

    def filter_out_keywords(self, keywords: Iterable[str]) -> bool:
        """Narrow to rows carrying none of ``keywords``. Empty selection is a no-op."""
        pattern = exclude_keywords_pattern(keywords)
        if not pattern:
            self.logr.debug("filter_out_keywords: empty selection")
            return False
        self.filter(pattern)
        return True

    def reset(self) -> None:
        self.query = None
        self.pattern = self.config.default_pattern
        self.failures = []
        self.logr.debug("reset: pattern=%r", self.pattern)

    def toggle_sort(self) -> bool:
        self.descending = not self.descending
        return self.descending

    # ---- Collaborators ----
    def filenames(self) -> List[str]:
        return [os.path.relpath(p, self.directory) for p in self.paths()]

    def export(self, marker: Marker) -> List[str]:
        """Hand the current row filenames to a file-manager collaborator."""
        names = self.filenames()
        self.logr.debug("export: %d files", len(names))
        marker(self.directory, names)
        return names

    def activate(self, path: str) -> None:
        self.config.opener(path)

    def keywords(self) -> List[str]:
        return collect_keywords(self.paths())
