"""Tolerant numeric view over the string fields of analysis results.

Results keep whatever the model returned; these helpers only read them.
"""
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Tuple

_NUMBER_RE = re.compile(r"-?\d[\d,]*(?:\.\d+)?|-?\.\d+")
TWO_PLACES = Decimal("0.01")


def parse_amount(value: Any) -> Optional[Decimal]:
    """Best-effort parse of amounts such as ``"$1,234.50"``, ``"10%"`` or ``"AUD 99.99"``.

    Returns ``None`` when no single number can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            return None
        return amount if amount.is_finite() else None

    matches = _NUMBER_RE.findall(str(value))
    # "10 - 12" or "5 for 2" are ambiguous
    if len(matches) != 1:
        return None
    try:
        return Decimal(matches[0].replace(",", ""))
    except InvalidOperation:
        return None


def sum_totals(items: Iterable[Any], field: str = "total_price") -> Tuple[Decimal, int, List[int]]:
    """Sum ``field`` across results.

    Returns ``(total, counted, unparsed_indices)``; the total is rounded to
    two places.
    """
    total = Decimal("0")
    counted = 0
    unparsed: List[int] = []
    for index, item in enumerate(items):
        raw = item.get(field) if isinstance(item, dict) else getattr(item, field, None)
        amount = parse_amount(raw)
        if amount is None:
            unparsed.append(index)
            continue
        total += amount
        counted += 1
    return total.quantize(TWO_PLACES, rounding=ROUND_HALF_UP), counted, unparsed
