"""Console logging setup for the stash CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "stash-console"


def setup_console_logging(verbose: bool = False) -> logging.Handler:
    """Attach a console handler to the root logger.

    INFO and above are shown; ``verbose`` lowers the threshold to DEBUG so
    timing lines are visible. Calling this again only adjusts the level.
    """

    level = logging.DEBUG if verbose else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return handler

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
    return console_handler


__all__ = ["LOG_FORMAT", "setup_console_logging"]
