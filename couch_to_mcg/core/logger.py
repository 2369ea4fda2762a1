"""Loguru sinks for the couch-to-mcg CLI.

Plan tables and JSON go to stdout, so every log record goes to stderr and
piping `schedule --json` stays clean. LOG_FILE adds a plain-text history of
plan runs that rotates weekly.
"""

import sys
from pathlib import Path

from loguru import logger

from couch_to_mcg.config.settings import Settings

CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> <cyan>{name}</cyan> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{line} | {message}"

FILE_ROTATION = "1 week"
FILE_RETENTION = 4


def configure_logging(config: Settings) -> list[int]:
    """Replace loguru's sinks with the ones the settings ask for.

    Args:
        config: Settings providing log_level and log_file

    Returns:
        Ids of the sinks added (console first, then the file sink if any)
    """
    logger.remove()
    sink_ids = [logger.add(sys.stderr, format=CONSOLE_FORMAT, level=config.log_level)]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=config.log_level,
                rotation=FILE_ROTATION,
                retention=FILE_RETENTION,
                encoding="utf-8",
            )
        )

    logger.debug(f"Logging to stderr at {config.log_level}" + (f" and {config.log_file}" if config.log_file else ""))
    return sink_ids
