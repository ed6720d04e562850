from typing import Any, Optional


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(InfrastructureError):
    """Raised when there's an issue with configuration."""
    pass


class CredentialError(InfrastructureError):
    """Raised when a stored secret cannot be decrypted."""
    pass


class TransportError(InfrastructureError):
    """Raised when the management service answers with a fault.

    Carries the raw status code and body; no interpretation happens here.
    """
    def __init__(self, status_code: Optional[int], body: str, message: Optional[str] = None):
        super().__init__(message or f"Service request failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class OperationError(InfrastructureError):
    """Normalized error decoded from a service error envelope."""
    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Error Code: {code}\nError Message: {message}")
        self.code = code
        self.message = message
        self.status_code = status_code
