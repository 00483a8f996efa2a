"""
Chat gateway error types.
"""

from typing import Optional


class GatewayError(Exception):
    """Base exception for gateway errors."""

    status_code = 500

    def __init__(self, message: str, provider: Optional[str] = None):
        self.message = message
        self.provider = provider
        super().__init__(message)


class MalformedRequestError(GatewayError):
    """Raised when a completion request fails basic shape checks."""

    status_code = 400


class UnsupportedProviderError(GatewayError):
    """Raised when the provider tag has no registered adapter."""

    status_code = 400

    def __init__(self, provider: str):
        super().__init__(f"Unsupported provider: {provider!r}", provider=provider)


class ProviderError(GatewayError):
    """Raised when a provider answers with a non-success status.

    The raw response body is kept verbatim in ``body``.
    """

    status_code = 502

    def __init__(self, provider: str, body: str, status: Optional[int] = None):
        super().__init__(f"{provider} API error: {body}", provider=provider)
        self.body = body
        self.status = status


class TransportError(GatewayError):
    """Raised when the provider cannot be reached (DNS, connect, timeout)."""

    status_code = 502
