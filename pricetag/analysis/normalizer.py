"""Turns free-form model output into the structured analysis result."""
import json
import logging
import re
from typing import Any, Dict

from pricetag.analysis.composer import ComposedRequest
from pricetag.analysis.errors import ExtractionError, ParseError
from pricetag.app.schemas import DebugInfo, DebugRequest, with_debug

logger = logging.getLogger(__name__)

# Greedy: first "{" to last "}" so nested objects stay intact
JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def extract_json(raw_text: str) -> Dict[str, Any]:
    match = JSON_OBJECT_RE.search(raw_text)
    if not match:
        logger.error("No JSON object in model response: %r", raw_text)
        raise ExtractionError(raw_text=raw_text)
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON response from model: %r", raw_text)
        raise ParseError(raw_text=raw_text) from exc


def normalize_response(
    raw_text: str,
    composed: ComposedRequest,
    currency: str,
    region: str,
) -> Dict[str, Any]:
    """Parse ``raw_text`` and attach the debug payload.

    Fields are passed through as returned by the model: no type checks,
    no consistency checks, missing or extra keys are kept as-is.
    """
    parsed = extract_json(raw_text)
    debug = DebugInfo(
        request=DebugRequest(
            currency=currency,
            region=region,
            prompt=composed.prompt,
            isManualEntry=composed.is_manual_entry,
        ),
        response=raw_text,
    )
    return with_debug(parsed, debug)
