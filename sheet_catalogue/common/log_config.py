"""
Logging Configuration

Configures the "sheet_catalogue" logger used by every pipeline module
(fetch race decisions, snapshot fallbacks, dropped sheet rows).
Output goes to stderr so script summaries on stdout stay readable.

HTTP client libraries (aiohttp, urllib3 under requests) are held at
WARNING unless verbose output is requested.
"""

import logging
import sys

LOGGER_NAME = "sheet_catalogue"
HTTP_LOGGERS = ("aiohttp", "urllib3")
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the catalogue logger.

    Args:
        verbose: DEBUG level; shows every dropped row and HTTP client chatter
        quiet: WARNING level; only fallbacks, unknown headers and failures
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
