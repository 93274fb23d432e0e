"""
Resume Service — turn a free-form personal description into resume JSON.

Pipeline (each stage raises a typed ExtractionError and stops the run):
  • Validate the description (non-empty after trimming)
  • Compose the extraction prompt
  • Ask the model through the OpenRouter gateway
  • Parse the reply into a generic JSON tree
  • Normalize projects[].technologiesUsed into a list of strings
  • Render the tree back to JSON for the caller

Nothing is cached: every call parses a fresh tree.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from resume_ai.config import settings
from resume_ai.errors import MalformedModelOutputError, ValidationError
from resume_ai.prompts.resume_extractor import build_prompt
from resume_ai.services.llm_service import OpenRouterGateway
from resume_ai.utils.text_cleanup import split_comma_separated, strip_code_fence

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────


async def analyze_description(
    description: str,
    *,
    gateway: OpenRouterGateway,
    model_key: str | None = None,
) -> dict[str, Any]:
    """Run the full extraction pipeline and return the normalized resume tree."""
    text = validate_description(description)
    prompt = build_prompt(text)

    logger.info(f"Analyzing description ({len(text)} chars)")

    content = await gateway.complete(prompt, model_key=model_key or settings.default_model_key)
    logger.debug(f"Model reply:\n{content}")

    tree = parse_model_reply(content)
    return normalize_resume(tree)


def validate_description(description: str) -> str:
    """Return the trimmed description, or raise ValidationError if nothing is left."""
    text = description.strip()
    if not text:
        raise ValidationError("Description cannot be empty")
    return text


def parse_model_reply(content: str) -> dict[str, Any]:
    """Parse the model's reply as a JSON object; no schema checks."""
    try:
        data = json.loads(
            strip_code_fence(content),
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (ValueError, RecursionError) as e:
        logger.warning(f"Model reply is not valid JSON: {content[:200]!r}")
        raise MalformedModelOutputError(f"Model output is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        logger.warning(f"Model reply is JSON but not an object: {type(data).__name__}")
        raise MalformedModelOutputError(
            f"Model output must be a JSON object, got {type(data).__name__}"
        )
    return data


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {token}")
    return value


def normalize_resume(tree: dict[str, Any]) -> dict[str, Any]:
    """
    Coerce projects[].technologiesUsed into a list of strings, in place.

    Best effort: a missing or non-list "projects", non-dict entries and
    technologiesUsed values that are neither str nor list are left untouched.
    """
    projects = tree.get("projects")
    if not isinstance(projects, list):
        return tree

    for project in projects:
        if not isinstance(project, dict) or "technologiesUsed" not in project:
            continue
        technologies = project["technologiesUsed"]
        if isinstance(technologies, str):
            project["technologiesUsed"] = split_comma_separated(technologies)

    return tree


def render_document(tree: dict[str, Any]) -> bytes:
    """Serialize the normalized tree for the HTTP response."""
    return json.dumps(tree, ensure_ascii=False, allow_nan=False).encode("utf-8")
