"""
Prompts for daily reflection generation.
"""
import math
from typing import Any


DAILY_REFLECTION_PROMPT = """Today's date is {date}.
Identify the Catholic Feast/Day, Season, and traditional liturgical Color.
Provide the main Scripture of the day, a daily Virtue, a concrete Action Item to practice it, a 3-sentence Reflection, and a short Prayer.
Return ONLY a JSON object, with no text before or after it:
{ "feast": "Title", "season": "SeasonName", "color": "colorname", "scripture": "Verse text", "verse_ref": "Reference", "virtue": "Word: Action", "action": "Concrete action...", "reflection": "...", "prayer": "Short prayer..." }"""

# Marks a date that was never supplied (as opposed to an explicit null).
MISSING = object()


def format_date_value(value: Any) -> str:
    """Render a decoded JSON value as JavaScript string interpolation would."""
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else format_date_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def build_prompt(date: Any = MISSING) -> str:
    """Render the reflection prompt for ``date``.

    The date is opaque: whatever the client sent is interpolated and left for
    the model to interpret. A missing date is rendered as ``undefined``.
    """
    return DAILY_REFLECTION_PROMPT.replace("{date}", format_date_value(date))
