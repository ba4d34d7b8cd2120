"""Builds the instruction sent to the model for one price analysis."""
import base64
import binascii
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pricetag.analysis.errors import AnalysisError, ValidationError
from pricetag.inference.model_client import ImagePart, Part, TextPart
from pricetag.prompts.analyze_prompt import IMAGE_ANALYSIS_TEMPLATE, MANUAL_ENTRY_TEMPLATE

MANUAL_ENTRY_PREFIX = "Price:"
IMAGE_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ComposedRequest:
    prompt: str
    parts: List[Part]
    is_manual_entry: bool


def split_image_field(image: str) -> Tuple[Optional[str], Optional[bytes]]:
    """Interpret the ``image`` field of an analyze request.

    ``"Price: 12.50"`` is a manual entry and yields ``("12.50", None)``.
    Anything else is a data URL or bare base64 and yields ``(None, bytes)``.
    Undecodable image data is a processing failure (500), not a missing input.
    """
    if image.startswith(MANUAL_ENTRY_PREFIX):
        return image[len(MANUAL_ENTRY_PREFIX):].strip(), None

    _, sep, payload = image.partition(",")
    encoded = payload if sep and payload else image
    try:
        data = base64.b64decode(encoded, validate=False)
    except (binascii.Error, ValueError) as exc:
        raise AnalysisError("Invalid image data") from exc
    if not data:
        raise AnalysisError("Invalid image data")
    return None, data


def compose_request(
    price_text: Optional[str],
    image_bytes: Optional[bytes],
    currency: str,
    region: str,
) -> ComposedRequest:
    if (price_text is None) == (image_bytes is None):
        raise ValidationError("Exactly one of a price or an image is required")

    if price_text is not None:
        prompt = MANUAL_ENTRY_TEMPLATE.format(
            price=price_text,
            detected_price=price_text,
            region=region,
            currency=currency,
        )
        return ComposedRequest(prompt=prompt, parts=[TextPart(prompt)], is_manual_entry=True)

    prompt = IMAGE_ANALYSIS_TEMPLATE.format(
        detected_price="price shown on tag",
        region=region,
        currency=currency,
    )
    parts: List[Part] = [ImagePart(image_bytes, IMAGE_MIME_TYPE), TextPart(prompt)]
    return ComposedRequest(prompt=prompt, parts=parts, is_manual_entry=False)
