"""Model client interface shared by all generative-model backends."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable sampling configuration sent with every call."""

    temperature: float = 0.1
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 8192


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    data: bytes
    mime_type: str = "image/jpeg"


Part = Union[TextPart, ImagePart]


class ModelClient(abc.ABC):
    """A generative model that turns an ordered list of parts into free text."""

    provider_name: str = "base"
    model_name: str = ""

    @abc.abstractmethod
    def generate(self, parts: List[Part], config: GenerationConfig) -> str:
        """Send ``parts`` in order and return the model's text output.

        Any exception raised by the backend propagates unchanged; callers map
        it to an upstream failure.
        """
        ...
