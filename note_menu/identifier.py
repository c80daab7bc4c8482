import os
import re
from datetime import datetime
from typing import NamedTuple, Optional, Tuple

from dateutil.parser import isoparse
from rich.text import Text

from .errors import MalformedFilename
from .formatting import format_identifier


IDENTIFIER_FORMAT = "%Y%m%dT%H%M%S"
SIGNATURE_SEPARATOR = "=="
TITLE_SEPARATOR = "--"
KEYWORDS_SEPARATOR = "__"
KEYWORD_DELIMITER = "_"

NO_TITLE = "(No Title)"
NO_TITLE_STYLE = "dim italic"
KEYWORDS_STYLE = "italic"

IDENTIFIER_RE = re.compile(r"^\d{8}T\d{6}")
_SEPARATORS: Tuple[str, ...] = (SIGNATURE_SEPARATOR, TITLE_SEPARATOR, KEYWORDS_SEPARATOR)


class NoteName(NamedTuple):
    """Fields encoded in a note's filename."""
    path: str
    identifier: str
    timestamp: datetime
    signature: Optional[str]
    title: Optional[str]
    keywords: Tuple[str, ...]
    extension: str

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)


def _parse_timestamp(identifier: str, name: str) -> datetime:
    try:
        ts = isoparse(identifier)
    except ValueError as exc:
        raise MalformedFilename(name, f"invalid identifier {identifier!r}: {exc}") from exc
    # isoparse accepts hour 24 and rolls over to the next day
    if ts.strftime(IDENTIFIER_FORMAT) != identifier:
        raise MalformedFilename(name, f"invalid identifier {identifier!r}")
    return ts


def _field(body: str, separator: str) -> Optional[str]:
    """Return the text following ``separator`` up to the next field boundary."""
    start = body.find(separator)
    if start < 0:
        return None
    start += len(separator)
    end = len(body)
    for other in _SEPARATORS:
        if other == separator:
            continue
        pos = body.find(other, start)
        if 0 <= pos < end:
            end = pos
    return body[start:end]


def parse_filename(name: str) -> NoteName:
    """Split a conformant filename into its identifier, title and keywords.

    ``name`` may be a bare filename or a path; only the basename is parsed.
    Raises :class:`MalformedFilename` when the name does not start with a
    valid ``YYYYMMDDTHHMMSS`` identifier.
    """
    base = os.path.basename(name)
    m = IDENTIFIER_RE.match(base)
    if not m:
        raise MalformedFilename(base)
    identifier = m.group(0)
    timestamp = _parse_timestamp(identifier, base)

    rest = base[len(identifier):]
    # The extension starts at the first dot of the last field, so a dotted
    # title followed by keywords keeps both
    starts = [pos for pos in (rest.find(sep) for sep in _SEPARATORS) if pos >= 0]
    dot = rest.find(".", max(starts) if starts else 0)
    if dot < 0:
        body, extension = rest, ""
    else:
        body, extension = rest[:dot], rest[dot:]

    if body and not body.startswith(_SEPARATORS):
        raise MalformedFilename(base, f"unexpected text after identifier: {body!r}")

    keywords_field = _field(body, KEYWORDS_SEPARATOR)
    keywords: Tuple[str, ...] = ()
    if keywords_field:
        keywords = tuple(k for k in keywords_field.split(KEYWORD_DELIMITER) if k)

    return NoteName(
        path=name,
        identifier=identifier,
        timestamp=timestamp,
        signature=_field(body, SIGNATURE_SEPARATOR),
        title=_field(body, TITLE_SEPARATOR),
        keywords=keywords,
        extension=extension,
    )


def render_date(note: NoteName) -> str:
    return format_identifier(note.timestamp)


def render_title(note: NoteName) -> Text:
    if note.title is None:
        return Text(NO_TITLE, style=NO_TITLE_STYLE)
    return Text(note.title)


def render_keywords(note: NoteName) -> Text:
    return Text(", ".join(note.keywords), style=KEYWORDS_STYLE)
