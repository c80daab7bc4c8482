class NoteMenuError(Exception):
    """Base class for errors raised by note_menu."""


class MalformedFilename(NoteMenuError, ValueError):
    """A filename does not follow the identifier naming convention."""

    def __init__(self, name: str, reason: str = "missing identifier") -> None:
        super().__init__(f"{name!r}: {reason}")
        self.name = name
        self.reason = reason


class InvalidPattern(NoteMenuError, ValueError):
    """A filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: Exception) -> None:
        super().__init__(f"invalid filter pattern {pattern!r}: {error}")
        self.pattern = pattern
        self.error = error


class OpenerError(NoteMenuError):
    """The configured open action failed for a path."""
