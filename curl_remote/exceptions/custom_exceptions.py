"""Custom exception types for clearer error handling."""

class CurlRemoteError(Exception):
    """Base exception for the package."""

class InvalidURL(CurlRemoteError, ValueError):
    """Raised when a URL fails sanitization or the URL grammar."""

class InvalidMethod(CurlRemoteError, ValueError):
    """Raised when a transfer method other than GET or POST is requested."""

class InvalidUserAgent(CurlRemoteError, ValueError):
    """Raised when a user agent string is altered by sanitization."""

class TransferError(CurlRemoteError):
    """Raised when the underlying HTTP transfer fails."""
