"""
Helpers for turning model output into data.
"""
import re
from typing import Any, Optional

# First "{" through last "}". Greedy, not a balanced-brace scan: prose with
# stray braces around the payload will be swallowed into the match.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json_object(text: str) -> Optional[str]:
    """Return the JSON-object-shaped substring of ``text``, or None.

    Models often wrap structured output in markdown fences or a sentence of
    prose, e.g.::

        Here you go:
        ```json
        {"feast": "..."}
        ```
    """
    if not text:
        return None
    match = _JSON_OBJECT_RE.search(text)
    return match.group(0) if match else None


def get_string_from_content(content: Any) -> str:
    """Flatten LangChain message content to plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content) if content is not None else ""
