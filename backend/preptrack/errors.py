"""Error types raised by the AI transports."""


class TransportError(RuntimeError):
    """Raised when a remote AI call fails or returns an unusable payload."""
