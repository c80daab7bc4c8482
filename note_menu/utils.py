import os
from typing import List

from .identifier import IDENTIFIER_RE


def list_note_files(directory: str, recursive: bool = False) -> List[str]:
    """List files in ``directory`` whose names start with an identifier.

    Hidden files and directories are skipped. Paths are returned sorted.
    """
    found: List[str] = []
    if recursive:
        for root, dirs, files in os.walk(directory):
            dirs[:] = [d for d in dirs if not d.startswith(".")]
            for f in files:
                if IDENTIFIER_RE.match(f):
                    found.append(os.path.join(root, f))
    else:
        for f in os.listdir(directory):
            full = os.path.join(directory, f)
            if IDENTIFIER_RE.match(f) and os.path.isfile(full):
                found.append(full)
    return sorted(found)
