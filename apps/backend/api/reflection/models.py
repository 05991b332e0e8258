"""
Request/Response models for daily reflection API.
"""
from pydantic import BaseModel
from typing import Any, Optional


class ReflectionRequest(BaseModel):
    """Request model for reflection generation.

    ``date`` is opaque and passed to the prompt as sent.
    """
    date: Optional[Any] = None


class ReflectionResult(BaseModel):
    """Shape the prompt asks the model for.

    Documentation only: responses are passed through as generated.
    """
    feast: str
    season: str
    color: str
    scripture: str
    verse_ref: str
    virtue: str
    action: str
    reflection: str
    prayer: str


class ErrorResponse(BaseModel):
    """Error body returned on failure."""
    error: str
