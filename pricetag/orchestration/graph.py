from langgraph.graph import END, StateGraph

from pricetag.inference.model_client import GenerationConfig, ModelClient
from pricetag.orchestration.nodes.compose import compose_node
from pricetag.orchestration.nodes.intake import intake_node
from pricetag.orchestration.nodes.invoke_model import invoke_model_node
from pricetag.orchestration.nodes.normalize import normalize_node
from pricetag.orchestration.nodes.trace import trace_node
from pricetag.orchestration.state import AnalysisState


def build_workflow(client: ModelClient, config: GenerationConfig):
    def invoke_model(state: AnalysisState) -> AnalysisState:
        return invoke_model_node(state, client, config)

    graph = StateGraph(AnalysisState)

    graph.add_node("intake", intake_node)
    graph.add_node("compose", compose_node)
    graph.add_node("invoke_model", invoke_model)
    graph.add_node("normalize", normalize_node)
    graph.add_node("trace", trace_node)

    graph.set_entry_point("intake")
    graph.add_edge("intake", "compose")
    graph.add_edge("compose", "invoke_model")
    graph.add_edge("invoke_model", "normalize")
    graph.add_edge("normalize", "trace")
    graph.add_edge("trace", END)

    return graph.compile()
