"""
Application exception hierarchy.

Every error carries the HTTP status it maps to. Routes let these propagate;
the handler registered in streamvault.main turns them into
``{"error": message}`` responses.
"""


class StreamVaultError(Exception):
    """Base exception for application errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StreamVaultError):
    """Raised when request input is missing or out of range."""

    status_code = 400


class RateLimitError(StreamVaultError):
    """Raised when a caller exceeds the advertisement request rate limit."""

    status_code = 429


class ConfigurationError(StreamVaultError):
    """Raised when Supabase credentials are not configured."""

    status_code = 500


class StoreError(StreamVaultError):
    """Raised when a call to the remote store fails."""

    status_code = 500
