"""
Log file naming.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from loghelper.config.base import LogHelperSettings


def default_log_directory(document_root: Optional[str] = None) -> str:
    """
    Return `<document root>/logs`.

    The document root is taken from the argument, then the DOCUMENT_ROOT
    environment variable, then the current working directory.
    """
    root = document_root or os.environ.get("DOCUMENT_ROOT") or os.getcwd()
    return os.path.join(root, "logs")


@dataclass(frozen=True)
class LogTarget:
    """
    A log file identified by its directory and topic.

    Attributes:
        directory: Directory holding the log files
        topic: Topic name, embedded in the file name
    """

    directory: str
    topic: str = ""

    @property
    def path(self) -> str:
        """Full path of the log file, `<directory>/log_<topic>.txt`."""
        return os.path.join(self.directory, f"log_{self.topic}.txt")

    def with_topic(self, topic: str) -> "LogTarget":
        """Return the target for another topic in the same directory."""
        return replace(self, topic=topic)

    @classmethod
    def create(
        cls, topic: str = "", directory: Optional[str] = None
    ) -> "LogTarget":
        """Build a target, using the default log directory when none is given."""
        return cls(directory=directory or default_log_directory(), topic=topic)

    @classmethod
    def from_settings(cls, settings: LogHelperSettings) -> "LogTarget":
        """Build the target described by LOG_TOPIC and the resolved log directory."""
        return cls(directory=settings.log_directory, topic=settings.LOG_TOPIC)
