# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Console logging setup for applications embedding textstyle."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


RICH_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "green",
        "debug": "blue",
    }
)

_LEVEL_MARKUP = (
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
    (logging.NOTSET, "debug"),
)


class LevelAwareFormatter(logging.Formatter):
    """Wraps each message in the theme markup tag matching its level."""

    def format(self, record: logging.LogRecord) -> str:
        original_message = record.getMessage()
        tag = next(tag for level, tag in _LEVEL_MARKUP if record.levelno >= level)

        record.message = f"[{tag}]{original_message}[/{tag}]"
        try:
            return self.formatMessage(record)
        finally:
            record.message = original_message


def setup_logging(
    level: int = logging.WARNING,
    console: Optional[Console] = None,
    name: Optional[str] = None,
) -> RichHandler:
    """Configure a logger to print through Rich.

    Existing handlers of that logger are replaced.

    Args:
        level: Logging level (defaults to WARNING)
        console: Optional Rich console instance to use
        name: Logger to configure (defaults to the root logger)

    Returns:
        The installed handler
    """
    if console is None:
        console = Console(theme=RICH_THEME)

    target = logging.getLogger(name)
    if target.handlers:
        target.handlers.clear()
    target.setLevel(level)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        omit_repeated_times=False,
        show_path=False,
        markup=True,
        log_time_format="[%X]",
    )
    rich_handler.setFormatter(
        LevelAwareFormatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    target.addHandler(rich_handler)
    return rich_handler
