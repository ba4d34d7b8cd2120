"""Google Gemini backend."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import google.generativeai as genai

from pricetag.analysis.errors import ConfigurationError
from pricetag.inference.model_client import GenerationConfig, ImagePart, ModelClient, Part, TextPart

logger = logging.getLogger(__name__)


def _to_gemini_part(part: Part) -> Any:
    if isinstance(part, ImagePart):
        return {"mime_type": part.mime_type, "data": part.data}
    return part.text


class GeminiClient(ModelClient):
    """Sends each request as a fresh chat session with empty history."""

    provider_name = "gemini"

    def __init__(self, api_key: str | None, model_name: str = "gemini-2.0-flash"):
        self.api_key = api_key
        self.model_name = model_name
        self._configured = False

    def _configure(self) -> None:
        if self._configured:
            return
        if not self.api_key:
            raise ConfigurationError()
        genai.configure(api_key=self.api_key)
        self._configured = True

    def generate(self, parts: List[Part], config: GenerationConfig) -> str:
        self._configure()
        generation_config: Dict[str, Any] = {
            "temperature": config.temperature,
            "top_p": config.top_p,
            "top_k": config.top_k,
            "max_output_tokens": config.max_output_tokens,
        }
        model = genai.GenerativeModel(self.model_name, generation_config=generation_config)
        chat = model.start_chat(history=[])
        logger.debug("Sending %d part(s) to %s", len(parts), self.model_name)
        response = chat.send_message([_to_gemini_part(p) for p in parts])
        return response.text
