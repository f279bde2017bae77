"""Recover the skills JSON from free-text completion output.

Model output is not schema-enforced, so decoding is best effort: anything
that does not yield a valid ``{"skills": [...]}`` object is a ParseError.
"""

import json
import logging

import pydantic

from models.responses import AnalysisResult
from services.errors import ParseError

logger = logging.getLogger(__name__)


def find_json_object(text: str) -> str | None:
    """Return the span from the first '{' to the last '}', or None."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def parse_analysis(text: str) -> AnalysisResult:
    """Parse completion output into an AnalysisResult."""
    candidate = find_json_object(text or "")
    if candidate is None:
        logger.error("No JSON object in completion output (%d chars)", len(text or ""))
        raise ParseError("Failed to parse completion response: no JSON object found")

    # ValueError also covers the int-digit limit; RecursionError is deep nesting
    try:
        data = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse completion response as JSON: %s", e)
        raise ParseError(f"Failed to parse completion response: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("skills"), list):
        raise ParseError("Failed to parse completion response: missing 'skills' array")

    try:
        return AnalysisResult.model_validate({"skills": data["skills"]})
    except pydantic.ValidationError as e:
        logger.error("Completion response has malformed skills: %s", e)
        raise ParseError(
            f"Failed to parse completion response: malformed skills ({e.error_count()} error(s))"
        ) from e
