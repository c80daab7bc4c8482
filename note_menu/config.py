from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .openers import LaunchOpener, Opener


Lister = Callable[[str, bool], List[str]]


@dataclass
class MenuConfig:
    """Options recognized by a note menu view.

    Column widths are display hints for the table and do not affect which
    rows are produced.
    """

    default_pattern: str = ""
    opener: Opener = field(default_factory=LaunchOpener)
    date_width: int = 17
    title_width: int = 85
    keywords_width: int = 30
    descending: bool = True
    recursive: bool = False
    lister: Optional[Lister] = None
