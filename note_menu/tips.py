def menu_tips(filter_hint: str = "", prompt_hint: str = "") -> str:
    """Format tips line for the note menu."""
    if prompt_hint:
        return "Tips: type to edit, Enter=apply, Esc=cancel" + prompt_hint
    base = "Tips: Enter=open, F=regex, K=keywords, X=exclude, C=clear, E=export, S=sort, Ctrl+Q=quit"
    return base + (filter_hint or "")


def filter_hint(pattern: str, status: str) -> str:
    if not pattern:
        return f" | {status}"
    return f" | Filter: '{pattern}' ({status})"
