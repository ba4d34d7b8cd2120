from pricetag.analysis.composer import split_image_field
from pricetag.orchestration.state import AnalysisState


def intake_node(state: AnalysisState) -> AnalysisState:
    price_text, image_bytes = split_image_field(state["request"].image)
    state["price_text"] = price_text
    state["image_bytes"] = image_bytes
    state.setdefault("meta", {})["mode"] = "manual" if price_text is not None else "image"
    return state
