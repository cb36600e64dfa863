"""Console logging configuration for the CLI.

Library modules only create loggers; the entry point decides where
records go. All output goes to stderr so JSON printed on stdout stays
machine-readable.
"""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: Union[int, str] = "WARNING") -> None:
    """Install a single rich handler on the root logger.

    Clears existing handlers so repeated calls (e.g. in tests) do not
    duplicate output.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
