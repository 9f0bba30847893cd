"""
Execution context for long boundary scans.

scan_boundary() calls context.check_interruption() between elementary steps;
the context raises to abort the scan. The scanner is left in a consistent
state at the last completed step.
"""

import threading
import time
from typing import Optional, Protocol

from ..errors import InvalidArgumentError, ScanInterruptedError


class ScanContext(Protocol):
    """Anything that can abort a scan between two steps."""

    def check_interruption(self) -> None:
        ...


class CancellationContext:
    """
    Thread-safe cancellation flag with an optional deadline.

    Example:
        >>> context = CancellationContext(timeout=2.0)
        >>> scanner.scan_boundary(context)  # raises ScanInterruptedError after 2 s
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the context.

        Args:
            timeout: Seconds from now after which the scan is interrupted;
                None for no deadline
        """
        if timeout is not None and timeout < 0:
            raise InvalidArgumentError(f"timeout must be >= 0, got {timeout}")
        self._event = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + timeout

    def cancel(self) -> None:
        """Request interruption; may be called from another thread."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def check_interruption(self) -> None:
        if self._event.is_set():
            raise ScanInterruptedError("Boundary scan cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise ScanInterruptedError("Boundary scan deadline exceeded")


def validate_check_interval(check_interval: int) -> int:
    """Return check_interval if it is an integer >= 1, else raise InvalidArgumentError."""
    if isinstance(check_interval, bool) or not isinstance(check_interval, int):
        raise InvalidArgumentError(f"check_interval must be an integer, got {check_interval!r}")
    if check_interval < 1:
        raise InvalidArgumentError(f"check_interval must be >= 1, got {check_interval}")
    return check_interval
