import logging
from typing import Mapping, Optional

from loghelper.backends.base import LogBackend
from loghelper.logging import Logger, ensure_logger


class HostLoggingBackend(LogBackend):
    """
    Backend forwarding lines to the host application's stdlib logger.

    FastAPI and uvicorn log through the standard library, so this hands the
    line to whatever handlers the embedding application configured. The
    context mapping travels as `record.context`. `clear_before` is ignored.
    """

    def __init__(
        self,
        host_logger: Optional[logging.Logger] = None,
        name: str = "uvicorn.error",
        logger: Optional[Logger] = None,
    ):
        self.host_logger = host_logger or logging.getLogger(name)
        self._logger = ensure_logger(logger, __name__)

    def log(
        self,
        message: str,
        context: Optional[Mapping[str, str]] = None,
        clear_before: bool = False,
    ) -> bool:
        if clear_before:
            self._logger.debug("clear_before is ignored by the host backend")
        try:
            self.host_logger.info(message, extra={"context": dict(context or {})})
            return True
        except Exception as e:
            self._logger.error(f"HostLoggingBackend error: {e}")
            return False
