"""
FastAPI application for the daily reflection service.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from core.config import get_settings
from core.exception_handlers import register_exception_handlers
from api.reflection.routes import router as reflection_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Configure LangSmith tracing if API key is available
langchain_api_key = os.getenv("LANGCHAIN_API_KEY") or os.getenv("LANGSMITH_API_KEY")
if langchain_api_key:
    os.environ["LANGCHAIN_API_KEY"] = langchain_api_key
    os.environ["LANGCHAIN_TRACING_V2"] = os.getenv("LANGCHAIN_TRACING_V2", "true")
    # LANGSMITH_ENDPOINT and LANGSMITH_PROJECT are read from the environment as-is


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.is_configured:
        logger.info(f"Generation model {settings.model_name}")
    else:
        logger.warning("GEN_AI_KEY / VITE_GEN_AI_KEY not set; reflection requests will fail")
    yield


app = FastAPI(title="Daily Reflection API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    # Only POST is preflighted; anything else reaches the router and gets 405
    allow_methods=["POST"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(reflection_router, prefix="/api", tags=["reflection"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
