from abc import ABC, abstractmethod
from typing import Mapping, Optional

from loghelper.sinks.target import LogTarget


class LogBackend(ABC):
    """
    Abstract base class for log backends.

    A backend receives a fully rendered line (`<trace> message`) and
    persists or forwards it. Implementations must not raise: failures are
    reported on the diagnostic logger and returned as False.
    """

    @abstractmethod
    def log(
        self,
        message: str,
        context: Optional[Mapping[str, str]] = None,
        clear_before: bool = False,
    ) -> bool:
        """Write one rendered line. Returns True on success."""
        pass

    def for_target(self, target: LogTarget) -> "LogBackend":
        """
        Return the backend to use once the helper switches to `target`.

        Backends that do not write to topic files ignore the target.
        """
        return self
