"""Logging configuration for enumer.

Every module obtains its logger through :func:`get_logger` so that the whole
package hangs off the ``enumer`` logger. The CLI calls
:func:`configure_logging` once to attach a rich handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "enumer"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``enumer`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(debug: bool = False, console: Console | None = None) -> None:
    """Attach a RichHandler to the package logger.

    Args:
        debug: Log at DEBUG level when True, WARNING otherwise.
        console: Console to log to (defaults to stderr).
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=debug,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.propagate = False
    _configured = True
