from pricetag.analysis.normalizer import normalize_response
from pricetag.orchestration.state import AnalysisState


def normalize_node(state: AnalysisState) -> AnalysisState:
    req = state["request"]
    state["result"] = normalize_response(
        state["raw_response"],
        state["composed"],
        currency=req.currency,
        region=req.region,
    )
    return state
