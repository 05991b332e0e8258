"""
Daily reflection generation graph.
"""
import json
from typing import Dict, Any
from langchain_core.messages import HumanMessage
from langchain_core.runnables import RunnableConfig
from langgraph.graph import StateGraph, START, END
from agents.reflection.state import ReflectionGraphState
from agents.reflection.prompts import build_prompt, MISSING
from core.genai_client import get_generation_model
from core.exceptions import UpstreamError, ExtractionError, ParseError
from core.utils import extract_json_object, get_string_from_content


def _reject_constant(token: str):
    # NaN and Infinity are not JSON and cannot be sent back out
    raise ValueError(f"Unexpected token {token} in JSON")


async def generate_reflection_node(
    state: ReflectionGraphState,
    config: RunnableConfig
) -> Dict[str, Any]:
    """Ask the generation service for the day's reflection."""
    prompt = build_prompt(state.get("date", MISSING))

    try:
        model = get_generation_model(config)
        response = await model.ainvoke([HumanMessage(content=prompt)])
    except Exception as e:
        raise UpstreamError(str(e)) from e

    return {"raw_text": get_string_from_content(response.content)}


async def parse_reflection_node(
    state: ReflectionGraphState,
    config: RunnableConfig
) -> Dict[str, Any]:
    """Pull the JSON object out of the generated text."""
    raw_text = state.get("raw_text", "")

    candidate = extract_json_object(raw_text)
    if candidate is None:
        raise ExtractionError(detail=f"No JSON object in response: {raw_text[:200]!r}")

    try:
        reflection = json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(str(e), detail=f"{e} in {candidate[:200]!r}") from e

    return {"reflection": reflection}


# Build graph
builder = StateGraph(ReflectionGraphState)
builder.add_node("generateReflection", generate_reflection_node)
builder.add_node("parseReflection", parse_reflection_node)
builder.add_edge(START, "generateReflection")
builder.add_edge("generateReflection", "parseReflection")
builder.add_edge("parseReflection", END)

graph = builder.compile()
graph.name = "daily_reflection"
