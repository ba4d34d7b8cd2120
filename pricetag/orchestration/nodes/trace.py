import logging
import time

from pricetag.observability.metrics import build_meta
from pricetag.orchestration.state import AnalysisState

logger = logging.getLogger(__name__)


def trace_node(state: AnalysisState) -> AnalysisState:
    meta = state.setdefault("meta", {})
    start = meta.get("start_time_ms")
    if start:
        latency = int(time.time() * 1000 - start)
    else:
        latency = 0
    meta["latency_ms"] = latency
    meta["status"] = "ok"
    state["result"]["debug"]["meta"] = build_meta(
        latency_ms=latency,
        provider=meta.get("provider", ""),
        model=meta.get("model", ""),
    ).model_dump()
    logger.info(
        "mode=%s latency_ms=%s status=%s",
        meta.get("mode"),
        latency,
        meta["status"],
    )
    return state
