"""
The log helper facade.

A LogHelper ties together a topic, a trace label, a render mode and a
backend. It renders the value, labels it and hands the finished line to the
backend:

    helper = LogHelper(topic="orders", module="OrderModule")
    helper.set_backend(FileBackend(FileAppendSink(helper.target.path)))
    helper.log({"id": 42})
"""

from typing import Any, Optional, Union

from loghelper.backends import LogBackend, create_backend
from loghelper.config import LogHelperSettings, get_settings
from loghelper.errors import BackendUnavailableError
from loghelper.formatting import RenderMode, render
from loghelper.logging import Logger, ensure_logger
from loghelper.sinks import LogTarget, resolve_trace_label

CLEAR_NOTICE = "Log file is being cleared."


class LogHelper:
    """
    Entry point for writing log records.

    Args:
        topic: Topic name; selects the log file for file backends
        module: Fixed trace label; empty means the caller's file:line is used
        log_directory: Directory for topic files, defaults to DOCUMENT_ROOT/logs
        render_mode: How values are rendered
        backend: Destination for rendered lines; must be set before logging
        logger: Diagnostic logger
    """

    def __init__(
        self,
        topic: str = "",
        module: str = "",
        log_directory: Optional[str] = None,
        render_mode: Union[RenderMode, str, int] = RenderMode.PLAIN,
        backend: Optional[LogBackend] = None,
        logger: Optional[Logger] = None,
    ):
        self.module = module
        self.render_mode = RenderMode.parse(render_mode)
        self.backend = backend
        self._target = LogTarget.create(topic, log_directory)
        self._logger = ensure_logger(logger, __name__)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[LogHelperSettings] = None,
        logger: Optional[Logger] = None,
    ) -> "LogHelper":
        """
        Build a helper, including its backend, from settings.

        Args:
            settings: Settings to use; loaded from the environment if omitted
            logger: Diagnostic logger

        Example:
            ```python
            helper = LogHelper.from_settings(LogHelperSettings(LOG_TOPIC="orders"))
            helper.log("created #42")
            ```
        """
        settings = settings or get_settings()
        log = ensure_logger(logger, __name__, settings)
        target = LogTarget.from_settings(settings)
        backend = create_backend(settings.LOG_BACKEND, target, settings, log)
        return cls(
            topic=target.topic,
            module=settings.LOG_MODULE,
            log_directory=target.directory,
            render_mode=settings.LOG_RENDER_MODE,
            backend=backend,
            logger=log,
        )

    @property
    def target(self) -> LogTarget:
        return self._target

    @property
    def topic(self) -> str:
        return self._target.topic

    def set_backend(self, backend: LogBackend) -> None:
        self.backend = backend

    def set_render_mode(self, mode: Union[RenderMode, str, int]) -> None:
        self.render_mode = RenderMode.parse(mode)

    def set_topic(self, topic: str) -> None:
        """
        Switch to another topic.

        File backends are rebound to the new topic file; anything already
        written to the previous file stays where it is.
        """
        self._target = self._target.with_topic(topic)
        if self.backend is not None:
            self.backend = self.backend.for_target(self._target)

    def log(
        self,
        value: Any,
        clear_before: bool = False,
        trace: Optional[str] = None,
        stacklevel: int = 1,
    ) -> bool:
        """
        Render `value` and send `<trace> rendered` to the backend.

        Args:
            value: Anything; rendered with the helper's render mode
            clear_before: Ask the backend to drop earlier records first
                (only file backends can)
            trace: Explicit trace label, overriding the configured module
            stacklevel: Which caller to label when neither trace nor module
                is set; 1 is the caller of log

        Returns:
            True if the backend accepted the line. Logging failures never
            raise.

        Raises:
            BackendUnavailableError: If no backend has been set
        """
        if self.backend is None:
            raise BackendUnavailableError()

        label = trace or resolve_trace_label(self.module, stacklevel + 1)
        line = f"<{label}> {render(value, self.render_mode)}"
        context = {"topic": self.topic}

        if clear_before:
            self._logger.info(CLEAR_NOTICE, extra={"context": context})

        try:
            return bool(self.backend.log(line, context, clear_before))
        except Exception as e:
            self._logger.error(f"Backend {type(self.backend).__name__} failed: {e}")
            return False
