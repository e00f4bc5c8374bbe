"""Custom exceptions for the metrics client."""

class MetricsError(Exception):
    """Base exception for metrics endpoint operations."""
    pass

class TransportError(MetricsError):
    """Network failure while reaching the metrics endpoint."""
    pass

class ProtocolError(MetricsError):
    """Endpoint answered with a non-success HTTP status."""
    def __init__(self, message: str, status_code: int = None, response_text: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text

class DecodeError(MetricsError):
    """Response body is not valid JSON or not a traffic snapshot."""
    pass

class ConfigurationError(MetricsError):
    """Configuration is invalid."""
    pass
