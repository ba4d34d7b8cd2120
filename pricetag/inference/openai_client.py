"""OpenAI backend via LangChain (traced by LangSmith when enabled)."""

from __future__ import annotations

import base64
from typing import Any, Dict, List

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from pricetag.analysis.errors import ConfigurationError
from pricetag.inference.model_client import GenerationConfig, ImagePart, ModelClient, Part


def _content_text(content: Any) -> str:
    # Multimodal replies may come back as a list of content blocks
    if isinstance(content, str):
        return content
    chunks = []
    for block in content or []:
        if isinstance(block, str):
            chunks.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            chunks.append(block.get("text", ""))
    return "".join(chunks)


def _to_content_block(part: Part) -> Dict[str, Any]:
    if isinstance(part, ImagePart):
        encoded = base64.b64encode(part.data).decode("ascii")
        return {"type": "image_url", "image_url": {"url": f"data:{part.mime_type};base64,{encoded}"}}
    return {"type": "text", "text": part.text}


class OpenAIChatClient(ModelClient):
    """top_k has no OpenAI equivalent and is not sent."""

    provider_name = "openai"

    def __init__(self, api_key: str | None, model_name: str = "gpt-4o-mini", timeout: float | None = None):
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout

    def _llm(self, config: GenerationConfig) -> ChatOpenAI:
        if not self.api_key:
            raise ConfigurationError("OpenAI API key not found")
        kwargs: Dict[str, Any] = {
            "model": self.model_name,
            "temperature": config.temperature,
            "top_p": config.top_p,
            "max_tokens": config.max_output_tokens,
            "api_key": self.api_key,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return ChatOpenAI(**kwargs)

    def generate(self, parts: List[Part], config: GenerationConfig) -> str:
        llm = self._llm(config)
        message = HumanMessage(content=[_to_content_block(p) for p in parts])
        response = llm.invoke([message])
        return _content_text(response.content)
