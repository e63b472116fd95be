import logging
import sys

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def configure_logging(log_level='WARNING'):
    """
    Sets up the root logger with a single stderr handler.
    Diagnostics go to stderr so they never mix with command output on stdout.
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
