from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence

from textual import events
from textual.app import App, ComposeResult, SuspendNotSupported
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static
from textual.widgets.data_table import CellDoesNotExist

from .debug import get_logger
from .entries import DisplayRow
from .errors import InvalidPattern, NoteMenuError
from .filter_mixin import FilterMixin
from .keymap import menu_bindings
from .tips import filter_hint, menu_tips
from .version import __version__
from .view import Marker, NoteMenu, ViewStatus


def split_keywords(text: str) -> List[str]:
    """Split prompt input on commas and whitespace."""
    return [k for k in re.split(r"[,\s]+", text or "") if k]


class NoteTable(DataTable):
    BINDINGS = [
        Binding("home", "goto_first_row", "First", show=False),
        Binding("end", "goto_last_row", "Last", show=False),
    ]

    def action_goto_first_row(self) -> None:
        if self.row_count:
            self.move_cursor(row=0)

    def action_goto_last_row(self) -> None:
        if self.row_count:
            self.move_cursor(row=self.row_count - 1)

    def on_key(self, event: events.Key) -> None:  # type: ignore
        """Delegate prompt keys to the App-level mixin; consume if handled.

        Handling at the widget level keeps Enter and Backspace away from the
        table's own bindings while a prompt is open.
        """
        handler = getattr(self.app, "process_prompt_key", None)
        if handler and handler(event):
            event.stop()
            event.prevent_default()


class NoteMenuApp(FilterMixin, App):
    TITLE = "Notes"
    SUB_TITLE = f"v{__version__}"
    """Table of the notes in one directory.

    - Date, title and keywords columns derived from filenames.
    - F filters by regex, K by keywords, X excludes keywords; filters narrow
      the rows currently shown until C clears them.
    - Enter opens the highlighted note; E exports the shown filenames.
    """

    CSS = """
    #notes { height: 1fr; }
    #tips { height: 1; }
    """

    BINDINGS = menu_bindings()

    def __init__(self, menu: NoteMenu, marker: Optional[Marker] = None) -> None:
        super().__init__()
        self.menu = menu
        self.marker = marker or self._mark_and_exit
        self.logr = get_logger("tui")
        self.exported: Optional[List[str]] = None
        self._rows: Dict[str, DisplayRow] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        self.table = NoteTable(id="notes")
        self.table.cursor_type = "row"
        yield self.table
        self.tips = Static("", id="tips")
        yield self.tips
        yield Footer()

    def on_mount(self) -> None:
        self._setup_table()
        if self.menu.status is ViewStatus.UNINITIALIZED:
            self.menu.update()
        self._render_rows()
        self.table.focus()

    def _setup_table(self) -> None:
        cfg = self.menu.config
        t = self.table
        t.clear(columns=True)
        t.add_column("Date", key="date", width=cfg.date_width)
        t.add_column("Title", key="title", width=cfg.title_width)
        t.add_column("Keywords", key="keywords", width=cfg.keywords_width)

    def _render_rows(self) -> None:
        """Resolve the view's query and redraw the table, keeping the cursor row."""
        previous = self._selected_path()
        try:
            rows = self.menu.rows()
        except OSError as e:
            self.notify(f"Cannot list {self.menu.directory}: {e}", severity="error")
            rows = []
        self.table.clear()
        self._rows = {}
        for row in rows:
            self.table.add_row(*row.cells(), key=row.path)
            self._rows[row.path] = row
        if previous in self._rows:
            self.table.move_cursor(row=list(self._rows).index(previous))
        for failure in self.menu.failures:
            self.notify(str(failure), title="Malformed filename", severity="warning")
        self.sub_title = f"{self.menu.directory} - {len(rows)} notes"
        self._update_tips()
        self.logr.debug("render_rows: rows=%d status=%s", len(rows), self.menu.status.value)

    def _selected_path(self) -> Optional[str]:
        if not self._rows or not self.table.row_count:
            return None
        try:
            row_key, _ = self.table.coordinate_to_cell_key(self.table.cursor_coordinate)
        except CellDoesNotExist:
            return None
        return row_key.value

    def _update_tips(self) -> None:
        hint = filter_hint(self.menu.pattern, self.menu.status.value)
        self.tips.update(menu_tips(hint, self.get_prompt_hint()))

    # ---- Prompt hooks ----
    def _on_prompt_changed(self) -> None:
        self._update_tips()

    def _on_prompt_submitted(self, kind: str, text: str) -> None:
        try:
            if kind == "regex":
                self.menu.filter(text)
            elif kind == "keywords":
                if not self.menu.filter_by_keywords(split_keywords(text)):
                    self.notify("No keywords given; filter unchanged")
                    return
            elif kind == "exclude":
                if not self.menu.filter_out_keywords(split_keywords(text)):
                    self.notify("No keywords given; filter unchanged")
                    return
        except InvalidPattern as e:
            self.notify(str(e), title="Filter rejected", severity="error")
            return
        except OSError as e:
            self.notify(f"Cannot list {self.menu.directory}: {e}", title="Filter rejected", severity="error")
            return
        self._render_rows()

    def on_key(self, event: events.Key) -> None:  # type: ignore
        if self.process_prompt_key(event):
            event.stop()
            event.prevent_default()

    # ---- Commands ----
    def action_start_filter(self) -> None:
        self.start_prompt("regex")

    def action_start_keyword_filter(self) -> None:
        self.start_prompt("keywords")
        try:
            choices = self.menu.keywords()
        except OSError as e:
            self.notify(f"Cannot list {self.menu.directory}: {e}", severity="error")
            return
        if choices:
            self.notify(", ".join(choices), title="Keywords in view")

    def action_start_exclude_filter(self) -> None:
        self.start_prompt("exclude")

    def action_clear_filters(self) -> None:
        self.menu.reset()
        self.menu.update()
        self._render_rows()

    def action_refresh(self) -> None:
        self._render_rows()

    def action_toggle_sort(self) -> None:
        self.menu.toggle_sort()
        self._render_rows()

    def action_export(self) -> None:
        try:
            self.menu.export(self.marker)
        except OSError as e:
            self.notify(f"Cannot list {self.menu.directory}: {e}", title="Export failed", severity="error")

    def _mark_and_exit(self, directory: str, names: Sequence[str]) -> None:
        self.exported = list(names)
        self.exit(result=self.exported)

    def action_cursor_home(self) -> None:
        self.table.action_goto_first_row()

    def action_cursor_end(self) -> None:
        self.table.action_goto_last_row()

    def action_quit(self) -> None:
        """Close the prompt first when open; otherwise quit."""
        if self.prompt_active():
            self.cancel_prompt()
            return
        self.exit()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:  # type: ignore
        row = self._rows.get(event.row_key.value)
        if row is None:
            return
        try:
            try:
                with self.suspend():
                    row.activate()
            except SuspendNotSupported:
                row.activate()
        except NoteMenuError as e:
            self.notify(str(e), title="Open failed", severity="error")
