# src/foreground_task/core/errors.py

from __future__ import annotations


class ForegroundTaskError(Exception):
    """Base class for errors raised by the foreground task manager."""


class AlreadyRunningError(ForegroundTaskError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Already started. Please call this function after calling the stop function."
        )


class NotInitializedError(ForegroundTaskError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Not initialized. Please call this function after calling the init function."
        )


class BridgeCommunicationError(ForegroundTaskError):
    """
    Raised by a Service Bridge when the platform side cannot be reached
    or rejects a call.

    The manager never catches it: it reaches the caller unchanged.
    """

    def __init__(self, message: str, *, method: str | None = None) -> None:
        super().__init__(message)
        self.method = method
