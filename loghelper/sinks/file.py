"""
File-backed log sink.

Each write is a self-contained protocol: optionally delete the file, make
sure the directory exists, add a gap marker if the file has been idle, then
append the record under an exclusive flock and fsync it. No handle is kept
between writes, so one sink can be shared between threads.

Limitations:
- Uses fcntl advisory locks, so it is POSIX only.
- Lock acquisition blocks without a timeout.
- Deleting the file for a clearing write is not atomic with the append.
"""

import fcntl
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from loghelper.errors import (
    DeleteFailedError,
    DirectoryCreateFailedError,
    FailureKind,
    LockFailedError,
    OpenFailedError,
    SinkError,
    WriteFailedError,
)
from loghelper.formatting import RenderMode, render
from loghelper.logging import Logger, ensure_logger
from loghelper.sinks.gap import gap_marker, seconds_since_modified
from loghelper.sinks.target import LogTarget
from loghelper.sinks.trace import resolve_trace_label

DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class AppendResult:
    """
    Outcome of a sink write. Truthy when the record was persisted.

    Attributes:
        ok: Whether every step succeeded
        failure: Which step failed, if any
        error: Diagnostic message for the failure
    """

    ok: bool
    failure: Optional[FailureKind] = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def succeeded(cls) -> "AppendResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, failure: FailureKind, error: str) -> "AppendResult":
        return cls(ok=False, failure=failure, error=error)


class FileAppendSink:
    """
    Appends log records to one file.

    Args:
        path: File to append to
        module: Fixed trace label; empty means "resolve from the caller"
        mode: Render mode applied by `append`
        logger: Diagnostic logger for failures
        clock: Source of the current UNIX time
    """

    def __init__(
        self,
        path: str,
        module: str = "",
        mode: Union[RenderMode, str, int] = RenderMode.PLAIN,
        logger: Optional[Logger] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.path = path
        self.module = module
        self.mode = RenderMode.parse(mode)
        self._clock = clock
        self._logger = ensure_logger(logger, __name__)

    @classmethod
    def for_target(cls, target: LogTarget, **kwargs: Any) -> "FileAppendSink":
        """Create a sink writing to `target.path`."""
        return cls(target.path, **kwargs)

    def with_path(self, path: str) -> "FileAppendSink":
        """Return a sink configured like this one but writing to `path`."""
        return FileAppendSink(path, self.module, self.mode, self._logger, self._clock)

    def append(
        self,
        message: Any,
        clear_before: bool = False,
        trace: Optional[str] = None,
        stacklevel: int = 1,
    ) -> AppendResult:
        """
        Render `message` and append it as `<trace> message`.

        Args:
            message: Any value; rendered with the sink's mode
            clear_before: Delete the existing file before writing
            trace: Explicit trace label, overriding the configured module
            stacklevel: Which caller to label when no trace or module is set;
                1 is the caller of append

        Returns:
            AppendResult, truthy on success
        """
        label = trace or resolve_trace_label(self.module, stacklevel + 1)
        return self.write(f"<{label}> {render(message, self.mode)}", clear_before)

    def write(self, line: str, clear_before: bool = False) -> AppendResult:
        """
        Append an already rendered record line, preceded by a gap marker if due.

        Never raises; failures are logged on the diagnostic logger and
        reported through the result.
        """
        try:
            if clear_before:
                self._clear()
            self._ensure_directory()

            now = self._clock()
            entries = []
            marker = gap_marker(seconds_since_modified(self.path, now), now)
            if marker:
                entries.append(marker)
            entries.append(line)

            self._append_locked("".join(f"{entry}\n" for entry in entries))
        except SinkError as e:
            self._logger.error(
                f"FileAppendSink error: {e.message}", extra={"details": e.details}
            )
            return AppendResult.failed(e.kind, e.message)
        except Exception as e:
            self._logger.error(f"FileAppendSink error: {e}")
            return AppendResult.failed(FailureKind.WRITE_FAILED, str(e))
        return AppendResult.succeeded()

    def _clear(self) -> None:
        try:
            os.remove(self.path)
            self._logger.debug(f"Cleared log file: {self.path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            raise DeleteFailedError(self.path, {"reason": str(e)}) from e

    def _ensure_directory(self) -> None:
        directory = os.path.dirname(self.path)
        if not directory or os.path.isdir(directory):
            return
        try:
            os.makedirs(directory, mode=DIRECTORY_MODE, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailedError(directory, {"reason": str(e)}) from e

    def _append_locked(self, content: str) -> None:
        try:
            handle = open(self.path, "a", encoding="utf-8", errors="backslashreplace")
        except OSError as e:
            raise OpenFailedError(self.path, {"reason": str(e)}) from e

        with handle:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            except OSError as e:
                raise LockFailedError(self.path, {"reason": str(e)}) from e
            try:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            except OSError as e:
                raise WriteFailedError(self.path, {"reason": str(e)}) from e
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
