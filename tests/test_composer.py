"""Tests for pricetag.analysis.composer."""

import base64

import pytest

from pricetag.analysis.composer import compose_request, split_image_field
from pricetag.analysis.errors import AnalysisError, ValidationError
from pricetag.app.schemas import RESULT_FIELDS
from pricetag.inference.model_client import ImagePart, TextPart

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


class TestSplitImageField:
    def test_manual_entry(self):
        assert split_image_field("Price: 99.99") == ("99.99", None)

    def test_manual_entry_without_space(self):
        assert split_image_field("Price:12") == ("12", None)

    def test_data_url(self):
        data_url = "data:image/jpeg;base64," + base64.b64encode(JPEG_BYTES).decode()
        assert split_image_field(data_url) == (None, JPEG_BYTES)

    def test_bare_base64(self):
        assert split_image_field(base64.b64encode(JPEG_BYTES).decode()) == (None, JPEG_BYTES)

    def test_undecodable_image(self):
        with pytest.raises(AnalysisError) as excinfo:
            split_image_field("data:image/jpeg;base64,abc")
        assert excinfo.value.status_code == 500
        assert not isinstance(excinfo.value, ValidationError)


class TestManualEntryPrompt:
    def test_contains_price_region_and_currency(self):
        composed = compose_request("P-42.10", None, "EUR", "New Zealand")
        assert composed.is_manual_entry
        assert "P-42.10" in composed.prompt
        assert "New Zealand" in composed.prompt
        assert "EUR" in composed.prompt

    def test_requests_the_seven_fields(self):
        composed = compose_request("10", None, "USD", "Canada")
        for field in RESULT_FIELDS:
            assert f'"{field}"' in composed.prompt
        assert composed.prompt.count('": "') == len(RESULT_FIELDS)

    def test_echoes_price_as_detected_price(self):
        composed = compose_request("99.99", None, "USD", "Australia")
        assert '"detected_price": "99.99"' in composed.prompt

    def test_gst_rule_present(self):
        composed = compose_request("99.99", None, "USD", "Australia")
        assert "GST is included in displayed prices, report $0 additional tax" in composed.prompt
        assert "Default to 0% if tax rate cannot be determined" in composed.prompt

    def test_text_only_parts(self):
        composed = compose_request("5", None, "USD", "Japan")
        assert composed.parts == [TextPart(composed.prompt)]

    def test_braces_in_price_are_kept(self):
        composed = compose_request("{weird}", None, "USD", "Japan")
        assert "Price entered: {weird}" in composed.prompt


class TestImagePrompt:
    def test_selects_image_variant(self):
        composed = compose_request(None, JPEG_BYTES, "GBP", "Germany")
        assert not composed.is_manual_entry
        assert "price tag image" in composed.prompt
        assert "manually entered" not in composed.prompt
        assert "Germany" in composed.prompt
        assert "GBP" in composed.prompt

    def test_image_part_first_with_jpeg_mime(self):
        composed = compose_request(None, JPEG_BYTES, "GBP", "Germany")
        assert composed.parts[0] == ImagePart(JPEG_BYTES, "image/jpeg")
        assert composed.parts[1] == TextPart(composed.prompt)

    def test_requests_the_seven_fields(self):
        composed = compose_request(None, JPEG_BYTES, "USD", "France")
        for field in RESULT_FIELDS:
            assert f'"{field}"' in composed.prompt


class TestArguments:
    def test_neither_input(self):
        with pytest.raises(ValidationError):
            compose_request(None, None, "USD", "Australia")

    def test_both_inputs(self):
        with pytest.raises(ValidationError):
            compose_request("1", JPEG_BYTES, "USD", "Australia")
