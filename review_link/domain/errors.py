"""
Error types shared by the proxy and the link builder.

Every error carries the HTTP status and the client-safe message the web layer
sends back as ``{"error": message}``. Upstream detail never goes in here; it is
logged where it happens.
"""

from typing import Optional


class ReviewLinkAppError(Exception):
    """Base exception for errors that surface as an HTTP error response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ReviewLinkError(ReviewLinkAppError):
    """A review link could not be built (missing place identifier)."""

    status_code = 400
