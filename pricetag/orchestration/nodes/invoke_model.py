import logging

from pricetag.analysis.errors import AnalysisError, UpstreamError
from pricetag.inference.model_client import GenerationConfig, ModelClient
from pricetag.orchestration.state import AnalysisState

logger = logging.getLogger(__name__)


def invoke_model_node(state: AnalysisState, client: ModelClient, config: GenerationConfig) -> AnalysisState:
    composed = state["composed"]
    try:
        state["raw_response"] = client.generate(composed.parts, config)
    except AnalysisError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("%s API error", client.provider_name)
        raise UpstreamError(str(exc) or None) from exc
    return state
