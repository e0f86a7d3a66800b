import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"


def setup_logging(level="WARNING"):
    """Setup centralized logging configuration. Diagnostics go to stderr."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        # getLevelName hands back "Level X" for names it doesn't know
        level = resolved if isinstance(resolved, int) else logging.WARNING
    elif not isinstance(level, int):
        level = logging.WARNING

    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)
