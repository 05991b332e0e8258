"""
Google Generative AI client wrapper for LangChain.
"""
from typing import Optional
from langchain_core.runnables import RunnableConfig
from langchain_google_genai import ChatGoogleGenerativeAI
from core.config import DEFAULT_MODEL_NAME


def get_generation_model(
    config: RunnableConfig,
    temperature: Optional[float] = None,
) -> ChatGoogleGenerativeAI:
    """Get the generation model described by ``config["configurable"]``.

    Expects ``api_key`` (a ``SecretStr``) and optionally ``model_name``.
    """
    configurable = config.get("configurable", {}) if config else {}
    api_key = configurable.get("api_key")
    if not api_key:
        raise ValueError("api_key not found in configurable")

    model_kwargs = {}
    if temperature is not None:
        model_kwargs["temperature"] = temperature

    # max_retries=1 is a single attempt; failures surface to the caller
    return ChatGoogleGenerativeAI(
        model=configurable.get("model_name") or DEFAULT_MODEL_NAME,
        google_api_key=api_key,
        max_retries=1,
        **model_kwargs,
    )
