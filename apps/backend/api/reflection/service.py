"""
Business logic for daily reflection generation.
"""
from typing import Dict, Any
from pydantic import ValidationError
from agents.reflection.graph import graph
from agents.reflection.prompts import MISSING
from api.reflection.models import ReflectionRequest
from core.config import Settings, CREDENTIAL_ENV_VARS
from core.exceptions import ConfigurationError, InvalidRequestError


def parse_reflection_request(body: bytes) -> ReflectionRequest:
    """Parse a raw request body into a ReflectionRequest."""
    try:
        return ReflectionRequest.model_validate_json(body)
    except ValidationError as e:
        errors = e.errors()
        message = errors[0]["msg"] if errors else str(e)
        raise InvalidRequestError(message) from e


async def generate_reflection(body: bytes, settings: Settings) -> Dict[str, Any]:
    """Generate the reflection for the date named in ``body``."""
    if not settings.is_configured:
        raise ConfigurationError(
            detail=f"API key missing: none of {', '.join(CREDENTIAL_ENV_VARS)} is set"
        )

    request = parse_reflection_request(body)

    state = {"date": request.date if "date" in request.model_fields_set else MISSING}
    config = {
        "configurable": {
            "api_key": settings.api_key,
            "model_name": settings.model_name,
        }
    }

    result = await graph.ainvoke(state, config=config)
    return result["reflection"]
