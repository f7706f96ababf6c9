class TransportError(RuntimeError):
    """Raised when a page request cannot be encoded, sent, or its response decoded."""

    def __init__(self, source: str, message: str):
        super().__init__(f"[{source}] {message}")
        self.source = source
        self.message = message


class ConfigurationError(ValueError):
    """Raised when the command line does not name a url, hash and token."""


__all__ = ["TransportError", "ConfigurationError"]
