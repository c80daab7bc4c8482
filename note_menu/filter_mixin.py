from __future__ import annotations

from typing import Any, Dict


PROMPT_LABELS: Dict[str, str] = {
    "regex": "Filter regex",
    "keywords": "Keywords",
    "exclude": "Exclude keywords",
}


class FilterMixin:
    """Inline prompt for filter commands in Textual apps with a DataTable.

    Typed characters accumulate into the prompt text while a prompt is open;
    Enter submits, Escape cancels, Backspace edits.

    Host class should implement:
    - _on_prompt_changed(self): refresh tips
    - _on_prompt_submitted(self, kind, text): apply the filter command
    """

    _prompt_kind: str = ""
    _prompt_text: str = ""

    def prompt_active(self) -> bool:
        return bool(getattr(self, "_prompt_kind", ""))

    def get_prompt_hint(self) -> str:
        kind = getattr(self, "_prompt_kind", "")
        if not kind:
            return ""
        label = PROMPT_LABELS.get(kind, kind)
        return f" | {label}: '{self._prompt_text}' (Enter=apply, Esc=cancel)"

    def start_prompt(self, kind: str, initial: str = "") -> None:
        self._prompt_kind = kind
        self._prompt_text = initial
        self._on_prompt_changed()

    def cancel_prompt(self) -> None:
        if getattr(self, "_prompt_kind", ""):
            self._prompt_kind = ""
            self._prompt_text = ""
            self._on_prompt_changed()

    def submit_prompt(self) -> None:
        kind = getattr(self, "_prompt_kind", "")
        if not kind:
            return
        text = self._prompt_text
        self._prompt_kind = ""
        self._prompt_text = ""
        self._on_prompt_changed()
        self._on_prompt_submitted(kind, text)

    def prompt_backspace(self) -> None:
        if getattr(self, "_prompt_text", ""):
            self._prompt_text = self._prompt_text[:-1]
            self._on_prompt_changed()

    def prompt_append_char(self, ch: str) -> None:
        if not ch:
            return
        self._prompt_text = getattr(self, "_prompt_text", "") + ch
        self._on_prompt_changed()

    def _on_prompt_changed(self) -> None:
        """Hook for host to refresh tips. Overridden by host app."""
        pass

    def _on_prompt_submitted(self, kind: str, text: str) -> None:
        """Hook for host to run the filter command. Overridden by host app."""
        pass

    def process_prompt_key(self, event: Any) -> bool:
        """Handle printable, backspace, enter and escape while a prompt is open.

        Returns True if the event was consumed and should not propagate.
        """
        if not self.prompt_active():
            return False

        key = getattr(event, "key", None)
        ch = getattr(event, "character", None)

        if key in ("enter", "return"):
            self.submit_prompt()
            return True

        if key == "escape":
            self.cancel_prompt()
            return True

        # Robust backspace handling across terminals/platforms
        if key in ("backspace", "ctrl+h") or ch == "\b":
            self.prompt_backspace()
            return True

        ctrl = getattr(event, "ctrl", False)
        alt = getattr(event, "alt", False)
        meta = getattr(event, "meta", False)
        if isinstance(ch, str) and len(ch) == 1 and ch.isprintable() and not (ctrl or alt or meta):
            self.prompt_append_char(ch)
            return True

        return False
