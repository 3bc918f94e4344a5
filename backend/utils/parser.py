"""
JSON extraction for AI and proxy responses.

Accepts:
- Clean JSON
- JSON in ```json blocks
- JSON in ```blocks (no language tag)

Anything else is treated as malformed. Prose with embedded braces is not
searched for a JSON fragment.
"""

import json
import re
from typing import Any

from backend.errors import ParseError


def extract_json(text: str) -> Any:
    """
    Extract JSON from a response body.

    Args:
        text: Raw response text

    Returns:
        Parsed JSON value

    Raises:
        ParseError: if no strategy yields valid JSON
    """
    if not text or not text.strip():
        raise ParseError("Empty response, expected JSON")

    strategies = [
        _try_clean_json,
        _try_fenced_json,
        _try_fenced_any,
    ]

    for strategy in strategies:
        found, result = strategy(text)
        if found:
            return result

    raise ParseError(f"Response is not valid JSON: {text[:200]}")


def extract_json_object(text: str) -> dict:
    """Extract JSON and require it to be an object."""
    result = extract_json(text)
    if not isinstance(result, dict):
        raise ParseError(f"Expected a JSON object, got {type(result).__name__}")
    return result


def _try_clean_json(text: str) -> tuple[bool, Any]:
    """Try parsing the entire text as JSON."""
    try:
        return True, json.loads(text.strip())
    except json.JSONDecodeError:
        return False, None


def _try_fenced_json(text: str) -> tuple[bool, Any]:
    """Extract JSON from ```json ... ``` blocks."""
    pattern = r"```json\s*([\s\S]*?)\s*```"
    return _first_decodable(re.findall(pattern, text, re.IGNORECASE))


def _try_fenced_any(text: str) -> tuple[bool, Any]:
    """Extract JSON from ``` ... ``` blocks (any language or none)."""
    pattern = r"```(?:\w*)\s*([\s\S]*?)\s*```"
    return _first_decodable(re.findall(pattern, text))


def _first_decodable(candidates: list[str]) -> tuple[bool, Any]:
    for candidate in candidates:
        try:
            return True, json.loads(candidate.strip())
        except json.JSONDecodeError:
            continue
    return False, None
