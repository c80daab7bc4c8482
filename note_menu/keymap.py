from textual.binding import Binding


# Centralized default key bindings for the note menu.


def menu_bindings() -> list[Binding]:
    return [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("q", "quit", "Quit", show=False),
        Binding("f", "start_filter", "Filter"),
        Binding("k", "start_keyword_filter", "Keywords"),
        Binding("x", "start_exclude_filter", "Exclude"),
        Binding("c", "clear_filters", "Clear"),
        Binding("e", "export", "Export"),
        Binding("s", "toggle_sort", "Sort"),
        Binding("g", "refresh", "Refresh"),
        Binding("home", "cursor_home", "First", show=False),
        Binding("end", "cursor_end", "Last", show=False),
    ]
