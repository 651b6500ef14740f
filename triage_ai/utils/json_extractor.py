"""
JSON extraction for LLM responses returned in JSON mode.

Models asked for a bare object still sometimes answer with:
- the object wrapped in a ```json fence
- a sentence of preamble or trailing commentary
- a UTF-8 BOM in front

Only a top-level JSON object is accepted. No content repair is attempted;
anything that cannot be parsed as-is is a decode failure.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"^```[A-Za-z]*\s*\n?(.*?)\n?```$", re.DOTALL)


class JSONExtractionError(Exception):
    """Raised when no JSON object can be recovered from the content."""

    def __init__(self, message: str, raw_content: Optional[str], attempts: List[str]):
        super().__init__(message)
        self.raw_content = raw_content
        self.attempts = attempts


def extract_json(content: Optional[str]) -> Dict[str, Any]:
    """
    Parse the first JSON object out of LLM response content.

    Strategies, in order:
    1. Parse the content directly
    2. Parse the body of a markdown code fence
    3. Parse the first balanced {...} span

    Raises:
        JSONExtractionError: If every strategy fails
    """
    if not content or not content.strip():
        raise JSONExtractionError(
            message="Empty content received from LLM",
            raw_content=content,
            attempts=["Content was empty or whitespace only"],
        )

    text = content.lstrip("\ufeff").strip()
    attempts: List[str] = []

    candidates = [("direct", text)]
    fenced = _FENCE_PATTERN.match(text)
    if fenced:
        candidates.append(("fenced", fenced.group(1).strip()))
    span = _find_json_object(text)
    if span is not None:
        candidates.append(("brace_match", span))

    for strategy, candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as e:
            attempts.append(f"{strategy}: {e}")
            continue
        if isinstance(parsed, dict):
            if strategy != "direct":
                logger.debug("JSON extracted using %s strategy", strategy)
            return parsed
        attempts.append(f"{strategy}: got {type(parsed).__name__}, not object")

    logger.debug("JSON extraction failed: %s", attempts)
    raise JSONExtractionError(
        message="Failed to parse a JSON object from LLM response",
        raw_content=content,
        attempts=attempts,
    )


def _find_json_object(content: str) -> Optional[str]:
    """Return the first brace-balanced object span, skipping braces inside strings."""
    start = content.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(content)):
        char = content[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[start : i + 1]

    return None
