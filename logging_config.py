"""
Logging configuration for screener tools.

Usage:
    import logging_config
    logging_config.setup()
"""

import logging
import sys


def setup(level=logging.INFO):
    """
    Configure console logging for command-line use.

    - Uses shorter timestamp format (HH:MM:SS instead of full datetime)
    - Keeps per-log decoder skips quiet unless debugging
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(message)s", datefmt="%H:%M:%S"
        )
    )
    root.addHandler(console)

    # Malformed-log skips are DEBUG noise on busy bundles
    logging.getLogger("dex.registry").setLevel(max(level, logging.INFO))

    # get_logger() pins module loggers at INFO and gives them their own
    # handler; drop it so records reach the console once, through root
    for name in (
        "__main__",
        "sandwich_guard",
        "sandwich_guard.aggregator",
        "sandwich_guard.detector",
    ):
        module_logger = logging.getLogger(name)
        module_logger.setLevel(level)
        module_logger.handlers.clear()


def setup_minimal():
    """
    Only warnings and errors.
    """
    setup(level=logging.WARNING)


def setup_debug():
    """
    Verbose logging, including every skipped log record.
    """
    setup(level=logging.DEBUG)
    logging.getLogger("dex.registry").setLevel(logging.DEBUG)
