"""Filterable tabular view over a directory of identifier-named notes."""

from .version import __version__
from .errors import NoteMenuError, MalformedFilename, InvalidPattern
from .identifier import NoteName, parse_filename
from .entries import DisplayRow, build_row, build_rows
from .filtering import filter_paths, keyword_pattern
from .view import NoteMenu, ViewStatus

__all__ = [
    "__version__",
    "NoteMenuError",
    "MalformedFilename",
    "InvalidPattern",
    "NoteName",
    "parse_filename",
    "DisplayRow",
    "build_row",
    "build_rows",
    "filter_paths",
    "keyword_pattern",
    "NoteMenu",
    "ViewStatus",
]
