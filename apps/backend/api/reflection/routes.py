"""
FastAPI routes for daily reflection generation.
"""
from fastapi import APIRouter, Depends, Request
from api.reflection.models import ReflectionResult, ErrorResponse
from api.reflection.service import generate_reflection
from core.config import Settings, get_settings

router = APIRouter()


@router.post(
    "/generate-reflection",
    responses={
        200: {"model": ReflectionResult},
        500: {"model": ErrorResponse},
    },
)
async def generate_reflection_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """Generate the reflection for the posted date.

    The body is read raw so that malformed JSON is reported like any other
    generation failure instead of as a 422.
    """
    body = await request.body()
    return await generate_reflection(body, settings)
