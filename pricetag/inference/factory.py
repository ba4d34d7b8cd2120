from pricetag.app.settings import Settings
from pricetag.inference.model_client import ModelClient


def build_model_client(settings: Settings) -> ModelClient:
    if settings.model_provider == "openai":
        from pricetag.inference.openai_client import OpenAIChatClient

        return OpenAIChatClient(
            api_key=settings.openai_api_key,
            model_name=settings.openai_model,
            timeout=settings.request_timeout,
        )
    if settings.model_provider != "gemini":
        raise ValueError(f"Unknown model provider: {settings.model_provider}")

    from pricetag.inference.gemini_client import GeminiClient

    return GeminiClient(api_key=settings.gemini_api_key, model_name=settings.gemini_model)
