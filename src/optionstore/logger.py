"""
Logger collaborator.

The registry and the store only WRITE to the logger. Whoever owns the
logger lifecycle queries and clears it (has_errors / reset_errors).

Reports are counted here and forwarded to the standard ``logging``
module under the ``optionstore`` logger, so applications configure
output the usual way.
"""

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """The reporting contract consumed by the registry and the store."""

    def error(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def has_errors(self) -> bool: ...

    def has_warnings(self) -> bool: ...

    def reset_errors(self) -> None: ...

    def reset_warnings(self) -> None: ...


class Logger:
    """
    Counting logger backed by ``logging``.

    Properties:
        error_count: Number of errors reported since the last reset
        warning_count: Number of warnings reported since the last reset
    """

    def __init__(self, name: str = "optionstore"):
        self._log = logging.getLogger(name)
        self.error_count = 0
        self.warning_count = 0

    def error(self, message: str) -> None:
        self.error_count += 1
        self._log.error(message)

    # Alias kept for callers written against the reportError contract.
    report_error = error

    def warn(self, message: str) -> None:
        self.warning_count += 1
        self._log.warning(message)

    def info(self, message: str) -> None:
        self._log.info(message)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def has_warnings(self) -> bool:
        return self.warning_count > 0

    def reset_errors(self) -> None:
        self.error_count = 0

    def reset_warnings(self) -> None:
        self.warning_count = 0


__all__ = ["Reporter", "Logger"]
