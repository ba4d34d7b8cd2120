"""LangGraph state schema for the analyze workflow."""
from typing import Any, Dict, Optional, TypedDict

from pricetag.analysis.composer import ComposedRequest
from pricetag.app.schemas import AnalyzeRequest


class AnalysisState(TypedDict, total=False):
    """State schema for one analyze request."""

    # Input (presence of image/currency/region already checked)
    request: AnalyzeRequest

    # Intake: exactly one of these is set
    price_text: Optional[str]
    image_bytes: Optional[bytes]

    # Composition and model output
    composed: ComposedRequest
    raw_response: str

    # Output: parsed model object plus debug payload
    result: Dict[str, Any]

    # Metadata
    meta: Dict[str, Any]
