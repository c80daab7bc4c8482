import logging
import os
from typing import Optional


ROOT_LOGGER = "note_menu"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_FILE = "note_menu_debug.log"

# Library use stays silent until the CLI configures a handler
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def debug_requested() -> bool:
    return os.environ.get("NOTE_MENU_DEBUG", "0").lower() in {"1", "true", "yes", "on", "debug"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER).getChild(name)


def configure_logging(debug: bool = False, log_path: Optional[str] = None) -> Optional[logging.Handler]:
    """Attach the note_menu log handler.

    Logs go to ``log_path`` (or ``NOTE_MENU_LOG``) when given, else to
    ``note_menu_debug.log`` in the working directory when debugging. Without
    either, nothing is attached. Calling again replaces the earlier handler.
    """
    global _handler
    logger = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None

    debug = debug or debug_requested()
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    log_path = log_path or os.environ.get("NOTE_MENU_LOG")
    if log_path:
        log_path = os.path.expanduser(log_path)
    elif debug:
        log_path = os.path.join(os.getcwd(), DEFAULT_LOG_FILE)
    else:
        return None

    failure: Optional[OSError] = None
    try:
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        handler = logging.StreamHandler()
        failure = exc
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    if failure is not None:
        logger.warning("cannot open log file %s: %s; logging to stderr", log_path, failure)
    _handler = handler
    return handler
