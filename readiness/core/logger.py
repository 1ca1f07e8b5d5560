"""Loguru setup for the readiness service.

Every record carries a ``component`` tag (APP, API, READINESS, RECORDS, VIEW, DB)
rendered as ``[COMPONENT]`` in both sinks. Modules obtain a tagged logger
with ``get_logger`` instead of writing the tag into each message.
"""

import sys
from pathlib import Path

from loguru import logger

from readiness.config.settings import settings

DEFAULT_COMPONENT = "CORE"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>[{extra[component]}]</magenta> <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[component]}] {name}:{function}:{line} - {message}"

# Records logged before setup_logger runs still need a component
logger.configure(extra={"component": DEFAULT_COMPONENT})


def get_logger(component: str):
    """Return the shared loguru logger bound to a component tag."""
    return logger.bind(component=component.upper())


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Install the console sink and, when configured, a rotating file sink.

    Args:
        level: Minimum level; defaults to ``settings.log_level``
        log_file: File sink path; defaults to ``settings.log_file`` (None disables it)
        rotation: File rotation policy
        retention: File retention policy
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            diagnose=True,
        )

    get_logger("core").info(f"Logger initialized with level={level}, file={log_file or '-'}")
