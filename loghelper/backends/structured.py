from typing import Any, Mapping, Optional

import structlog

from loghelper.backends.base import LogBackend
from loghelper.logging import Logger, ensure_logger


class StructlogBackend(LogBackend):
    """
    Backend forwarding lines to a structlog logger at info level.

    The context mapping is passed as key/value pairs. `clear_before` is
    ignored: structlog output may go anywhere, so history cannot be
    truncated from here.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        channel: str = "app",
        logger: Optional[Logger] = None,
    ):
        self.channel = channel
        self._client = client
        self._logger = ensure_logger(logger, __name__)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = structlog.get_logger().bind(channel=self.channel)
        return self._client

    def log(
        self,
        message: str,
        context: Optional[Mapping[str, str]] = None,
        clear_before: bool = False,
    ) -> bool:
        if clear_before:
            self._logger.debug("clear_before is ignored by the structlog backend")
        try:
            self.client.info(message, **dict(context or {}))
            return True
        except Exception as e:
            self._logger.error(f"StructlogBackend error: {e}")
            return False
