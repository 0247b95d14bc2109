import logging
import sys
from typing import Optional


PACKAGE_LOGGER = "jsonschema_checker"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    *,
    level: int = logging.WARNING,
    stderr_level: int = logging.ERROR,
    formatter: Optional[logging.Formatter] = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Configure the engine logger:

    - records below ``stderr_level`` go to stdout
    - records at ``stderr_level`` and above go to stderr

    Only the named logger is touched, so embedding applications keep control
    of the root logger. Handlers installed by a previous call are replaced.
    """

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if getattr(handler, "_jsonschema_checker", False):
            logger.removeHandler(handler)
    logger.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)
    stdout_handler._jsonschema_checker = True

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)
    stderr_handler._jsonschema_checker = True

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger
