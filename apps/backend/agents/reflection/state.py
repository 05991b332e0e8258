"""
State definition for reflection graph.
"""
from typing import TypedDict, Dict, Any


class ReflectionGraphState(TypedDict, total=False):
    """State for reflection graph.

    ``date`` is ``prompts.MISSING`` when the request did not carry one.
    """
    date: Any
    raw_text: str
    reflection: Dict[str, Any]
