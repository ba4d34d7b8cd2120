from pricetag.analysis.composer import compose_request
from pricetag.orchestration.state import AnalysisState


def compose_node(state: AnalysisState) -> AnalysisState:
    req = state["request"]
    state["composed"] = compose_request(
        price_text=state.get("price_text"),
        image_bytes=state.get("image_bytes"),
        currency=req.currency,
        region=req.region,
    )
    return state
