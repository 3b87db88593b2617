"""Exceptions raised by lumbersend."""


class LumbersendError(Exception):
    """Base class for lumbersend errors."""


class ConnectionFailedError(LumbersendError):
    """Connecting to the log collector failed."""

    def __init__(self, address: str, reason: object) -> None:
        super().__init__(f"failed to connect to {address}: {reason}")
        self.address = address


class SendError(LumbersendError):
    """A batch could not be delivered to the log collector."""


class EncodingError(LumbersendError):
    """A record could not be rendered to JSON."""
