"""Standard library logging adapter."""

import logging
import sys
from typing import Any

from ..ports.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """Logger that writes key=value fields after the message."""

    def __init__(self, name: str = "genasset", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if fields:
            details = " ".join(f"{k}={v}" for k, v in fields.items())
            message = f"{message} {details}"
        self.logger.log(level, message)
