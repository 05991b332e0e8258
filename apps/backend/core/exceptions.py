"""
Custom exceptions for the application.
"""
from typing import Optional


class AppException(Exception):
    """Base exception for application errors."""
    def __init__(self, message: str, status_code: int = 500, detail: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ConfigurationError(AppException):
    """Generation credential could not be resolved.

    The client only ever sees the generic message; ``detail`` is for the
    server log.
    """
    def __init__(self, detail: Optional[str] = None):
        super().__init__("Server Configuration Error", status_code=500, detail=detail)


class InvalidRequestError(AppException):
    """Request body is not a JSON object."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class UpstreamError(AppException):
    """Generation service call failed."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class ExtractionError(AppException):
    """No JSON object found in the generated text."""
    def __init__(self, detail: Optional[str] = None):
        super().__init__("Failed to parse AI response", status_code=500, detail=detail)


class ParseError(AppException):
    """Extracted text is not valid JSON."""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=500, detail=detail)
