from __future__ import annotations

import os
import re
from typing import Iterable, List, Pattern, Sequence

from .debug import get_logger
from .errors import InvalidPattern, MalformedFilename
from .identifier import KEYWORD_DELIMITER, parse_filename


log = get_logger("filtering")

MATCH_ALL = ""


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a filter pattern, raising :class:`InvalidPattern` on bad syntax."""
    try:
        return re.compile(pattern or MATCH_ALL)
    except re.error as exc:
        raise InvalidPattern(pattern, exc) from exc


def filter_paths(candidates: Iterable[str], pattern: str) -> List[str]:
    """Return the candidates whose filename contains a match for ``pattern``.

    The whole filename is searched, so a pattern may target the identifier,
    title, keywords or extension. The empty pattern keeps every candidate.
    """
    regex = compile_pattern(pattern)
    return [p for p in candidates if regex.search(os.path.basename(p))]


def _keyword_tokens(keywords: Iterable[str]) -> List[str]:
    tokens = []
    for kw in keywords:
        kw = (kw or "").strip()
        if kw and kw not in tokens:
            tokens.append(kw)
    return [KEYWORD_DELIMITER + re.escape(kw) for kw in tokens]


def keyword_pattern(keywords: Iterable[str]) -> str:
    """Build a pattern matching filenames that carry any of ``keywords``.

    Each keyword is prefixed with the keyword delimiter and the results are
    joined as an alternation. Returns the empty string for an empty selection.
    """
    return "|".join(_keyword_tokens(keywords))


def exclude_keywords_pattern(keywords: Iterable[str]) -> str:
    """Build a pattern matching filenames that carry none of ``keywords``."""
    tokens = _keyword_tokens(keywords)
    if not tokens:
        return ""
    return r"^(?!.*(?:%s))" % "|".join(tokens)


def collect_keywords(paths: Sequence[str]) -> List[str]:
    """Return the sorted set of keywords used by ``paths``."""
    found = set()
    for path in paths:
        try:
            found.update(parse_filename(path).keywords)
        except MalformedFilename:
            log.debug("collect_keywords: ignoring %s", path)
    return sorted(found)
