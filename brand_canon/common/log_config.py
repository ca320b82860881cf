"""
Logging Configuration

Configures logging for the brand matching engine and its scripts.
Output goes to stderr to keep stdout clean for user-facing reports.

Per-title match traces ("<title> -> [brands] -> canonical: x") are logged at
DEBUG by the assigner. On a large catalog they drown everything else, so they
have their own switch instead of riding on ``verbose``.
"""

import logging
import sys

PACKAGE_LOGGER = "brand_canon"
MATCH_TRACE_LOGGER = "brand_canon.matching.assigner"


def setup_logging(verbose: bool = False, quiet: bool = False, trace_matches: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set level to DEBUG (match traces stay off)
        quiet: If True, set level to WARNING
        trace_matches: If True, log every title's matched and canonical brands
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    # Batch summaries and skipped-record warnings still follow ``level``
    trace_logger = logging.getLogger(MATCH_TRACE_LOGGER)
    trace_logger.setLevel(logging.DEBUG if trace_matches else max(level, logging.INFO))
