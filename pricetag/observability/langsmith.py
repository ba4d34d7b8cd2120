import os

from pricetag.app.settings import Settings

DEFAULT_PROJECT = "pricetag-lens"


def configure_tracing(settings: Settings) -> None:
    """Export LangSmith env vars for the OpenAI provider.

    Gemini calls go through google-generativeai directly and are never traced,
    so nothing is exported for that provider.
    """
    if settings.model_provider != "openai" or not settings.langchain_tracing_v2:
        return None
    os.environ["LANGCHAIN_TRACING_V2"] = "true"
    if settings.langsmith_api_key:
        os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    os.environ["LANGSMITH_PROJECT"] = settings.langsmith_project or DEFAULT_PROJECT
    return None
