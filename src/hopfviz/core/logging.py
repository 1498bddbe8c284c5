"""
Unified logging utilities for the hopfviz package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - set_console_level: Replace the default stderr sink with one at a given level.
    - setup_logfile: Add file logging with rotation/compression.
    - setup_json_logfile: Add a JSON-format log file for machine parsing.
"""

import sys

from loguru import logger

__all__ = [
    "logger",
    "set_console_level",
    "setup_logfile",
    "setup_json_logfile",
]

_console_sink_id = None


def set_console_level(level: str = "INFO") -> int:
    """
    Route console logging to stderr at the given level.

    The first call removes loguru's default handler; later calls replace the
    sink installed by the previous call.

    Returns:
        int: Sink id as returned by ``logger.add``.
    """
    global _console_sink_id
    if _console_sink_id is None:
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    # Resolve sys.stderr per message so redirected streams (test runners) are honored
    _console_sink_id = logger.add(
        lambda msg: sys.stderr.write(msg),
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    return _console_sink_id


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "INFO",
    colorize: bool = False
):
    """
    Add a rotating file handler to the global logger.

    Args:
        log_path (str): Path to the log file.
        rotation (str): Size or time string for log rotation.
        retention (str): How long to keep old logs.
        compression (str): Compression method for rotated logs.
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize file output (default: False).
    """
    sink_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        enqueue=True,
        backtrace=True,
        diagnose=True,
    )
    logger.info(f"Loguru file logging initialized: {log_path}")
    return sink_id


def setup_json_logfile(log_path: str, **kwargs):
    """
    Add a JSON-format log file (for machine parsing).
    Args:
        log_path (str): Path to JSON log file.
        **kwargs: Passed to logger.add().
    """
    sink_id = logger.add(
        log_path,
        serialize=True,
        **kwargs
    )
    logger.info(f"Loguru JSON logging initialized: {log_path}")
    return sink_id
