from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

RESULT_FIELDS = (
    "detected_price",
    "original_currency",
    "converted_price",
    "applicable_tax_rate",
    "applicable_taxes",
    "total_price_local",
    "total_price",
)


class AnalyzeRequest(BaseModel):
    model_config = {"extra": "ignore"}

    # Presence is checked in the handler so a missing field maps to 400, not 422
    image: Optional[str] = None  # data URL, bare base64 or "Price: <value>"
    currency: Optional[str] = None
    region: Optional[str] = None


class PriceAnalysisResult(BaseModel):
    """Fields the model is asked to return. Extra fields pass through untouched."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    detected_price: Optional[str] = None
    original_currency: Optional[str] = None
    converted_price: Optional[str] = None
    applicable_tax_rate: Optional[str] = None
    applicable_taxes: Optional[str] = None
    total_price_local: Optional[str] = None
    total_price: Optional[str] = None


class DebugRequest(BaseModel):
    currency: str
    region: str
    prompt: str
    isManualEntry: bool


class DebugInfo(BaseModel):
    request: DebugRequest
    response: str


class Meta(BaseModel):
    latency_ms: int = 0
    provider: str = ""
    model: str = ""


class ErrorResponse(BaseModel):
    error: str


class TotalsRequest(BaseModel):
    items: List[PriceAnalysisResult] = []
    field: str = Field("total_price", pattern="^(" + "|".join(RESULT_FIELDS) + ")$")


class TotalsResponse(BaseModel):
    total: str
    counted: int
    unparsed: List[int] = []


def with_debug(result: Dict[str, Any], debug: DebugInfo) -> Dict[str, Any]:
    return {**result, "debug": debug.model_dump(exclude_none=True)}
