import logging

import click
from rich import box
from rich.console import Console
from rich.table import Table

from .config import MenuConfig
from .debug import configure_logging, get_logger
from .errors import InvalidPattern
from .openers import CommandOpener, LaunchOpener
from .view import NoteMenu
from .version import __version__


def render_table(menu: NoteMenu) -> Table:
    """Build a rich table of the view's current rows."""
    cfg = menu.config
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("Date", width=cfg.date_width, no_wrap=True)
    table.add_column("Title", max_width=cfg.title_width)
    table.add_column("Keywords", max_width=cfg.keywords_width)
    for row in menu.rows():
        table.add_row(*row.cells())
    return table


def echo_marker(directory, names):
    """Write filenames one per line for a file manager or xargs to pick up."""
    for name in names:
        click.echo(name)


@click.command(context_settings={"auto_envvar_prefix": "NOTE_MENU"})
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.option(
    "--filter",
    "pattern",
    default="",
    envvar="NOTE_MENU_FILTER",
    help="Default regular expression applied to filenames; clearing filters restores it.",
)
@click.option(
    "--keyword",
    "keywords",
    multiple=True,
    help="Only show notes carrying one of these keywords. Repeat the option for more.",
)
@click.option(
    "--recursive",
    is_flag=True,
    default=False,
    help="Include notes in subdirectories.",
    show_default=True,
)
@click.option(
    "--ascending",
    is_flag=True,
    default=False,
    help="List oldest notes first instead of newest first.",
    show_default=True,
)
@click.option(
    "--open-cmd",
    default=None,
    help="Command used to open a note; '{path}' is replaced by the file path. Defaults to the system opener.",
)
@click.option("--date-width", default=17, show_default=True, type=click.IntRange(min=1), help="Width of the date column.")
@click.option("--title-width", default=85, show_default=True, type=click.IntRange(min=1), help="Width of the title column.")
@click.option("--keywords-width", default=30, show_default=True, type=click.IntRange(min=1), help="Width of the keywords column.")
@click.option(
    "--print",
    "print_only",
    is_flag=True,
    default=False,
    help="Print the table and exit instead of starting the interactive view.",
)
@click.option(
    "--export",
    "export_only",
    is_flag=True,
    default=False,
    help="Print the matching filenames one per line and exit.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable verbose debug logging to note_menu_debug.log",
    show_default=True,
)
@click.version_option(__version__, prog_name="note-menu")
def main(directory, pattern, keywords, recursive, ascending, open_cmd, date_width, title_width,
         keywords_width, print_only, export_only, debug):
    """
    Browse the identifier-named notes in DIRECTORY as a filterable table.
    """
    console = Console()
    err_console = Console(stderr=True)
    handler = configure_logging(debug=debug)
    if isinstance(handler, logging.FileHandler):
        err_console.print(f"[dim]Logging to {handler.baseFilename}[/dim]")
    log = get_logger("main")

    try:
        opener = CommandOpener(open_cmd) if open_cmd else LaunchOpener()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--open-cmd")

    config = MenuConfig(
        default_pattern=pattern,
        opener=opener,
        date_width=date_width,
        title_width=title_width,
        keywords_width=keywords_width,
        descending=not ascending,
        recursive=recursive,
    )
    try:
        menu = NoteMenu(directory, config)
    except InvalidPattern as e:
        raise click.BadParameter(str(e), param_hint="--filter")
    menu.populate()
    menu.filter_by_keywords(keywords)
    log.debug(
        "start: directory=%s pattern=%r keywords=%s recursive=%s descending=%s",
        directory,
        pattern,
        list(keywords),
        recursive,
        config.descending,
    )

    if export_only:
        menu.export(echo_marker)
        return

    if print_only:
        console.print(render_table(menu))
        for failure in menu.failures:
            err_console.print(f"[bold yellow]Warning:[/bold yellow] {failure}")
        return

    from .tui import NoteMenuApp

    app = NoteMenuApp(menu)
    app.run()
    if app.exported is not None:
        echo_marker(directory, app.exported)


if __name__ == "__main__":
    main()
