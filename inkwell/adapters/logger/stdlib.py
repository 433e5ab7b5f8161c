"""LoggerPort adapter backed by the standard logging module."""

import logging

from inkwell.core.ports import LoggerPort


class StdlibLoggerAdapter(LoggerPort):
    """Forwards LoggerPort calls to a named ``logging.Logger``.

    log maps to INFO, warn to WARNING and error to ERROR.
    """

    def __init__(self, name: str = "inkwell.service"):
        self.logger = logging.getLogger(name)

    def log(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
