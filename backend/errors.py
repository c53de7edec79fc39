"""Exceptions raised while configuring the service or talking to Stockfish."""


class BestMoveError(Exception):
    """Base class for all errors raised by this service."""


class ConfigurationError(BestMoveError):
    """A required environment value is missing. Fatal at startup."""


class UpstreamHttpError(BestMoveError):
    """The Stockfish API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Stockfish API returned {status_code}: {reason}")


class TransportError(BestMoveError):
    """The request to the Stockfish API could not complete."""


class SchemaViolationError(BestMoveError):
    """The Stockfish API answered 2xx with a body matching no known shape."""

    def __init__(self, details: list[dict]):
        self.details = details
        super().__init__("Invalid response format from Stockfish API")
