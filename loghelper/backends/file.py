from typing import Mapping, Optional

from loghelper.backends.base import LogBackend
from loghelper.logging import Logger
from loghelper.sinks.file import FileAppendSink
from loghelper.sinks.target import LogTarget


class FileBackend(LogBackend):
    """
    Backend appending lines to a topic file through a FileAppendSink.

    The context mapping is not written to the file.
    """

    def __init__(self, sink: FileAppendSink):
        self.sink = sink

    @classmethod
    def for_path(cls, path: str, logger: Optional[Logger] = None) -> "FileBackend":
        return cls(FileAppendSink(path, logger=logger))

    @property
    def path(self) -> str:
        return self.sink.path

    def log(
        self,
        message: str,
        context: Optional[Mapping[str, str]] = None,
        clear_before: bool = False,
    ) -> bool:
        return bool(self.sink.write(message, clear_before))

    def for_target(self, target: LogTarget) -> "FileBackend":
        # The previous file is left untouched.
        return FileBackend(self.sink.with_path(target.path))
