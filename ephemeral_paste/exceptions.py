"""
Application exceptions.

    PasteError (base)
    ├── ValidationError     → 400 Bad Request
    └── PasteNotFoundError  → 404 Not Found

Anything else that escapes a route is reported as a 500.
"""


class PasteError(Exception):
    """Base exception carrying a message that is safe to show to clients."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


class ValidationError(PasteError):
    """Client sent a create request that cannot be stored."""

    status_code = 400
    error = "Invalid input"

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class PasteNotFoundError(PasteError):
    """
    Paste is unknown, expired, or out of views.

    The three cases share one message so callers cannot tell them apart.
    """

    status_code = 404
    error = "Not found"

    def __init__(self, message: str = "Paste not found or has expired"):
        super().__init__(message)
