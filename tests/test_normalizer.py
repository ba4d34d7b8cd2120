"""Tests for pricetag.analysis.normalizer."""

import json

import pytest

from pricetag.analysis.composer import compose_request
from pricetag.analysis.errors import ExtractionError, ParseError
from pricetag.analysis.normalizer import extract_json, normalize_response

from conftest import SAMPLE_RESULT


class TestExtractJson:
    def test_plain_object(self):
        assert extract_json(json.dumps(SAMPLE_RESULT)) == SAMPLE_RESULT

    def test_surrounded_by_prose(self):
        raw = "Sure! Here is the analysis:\n" + json.dumps(SAMPLE_RESULT) + "\nLet me know if you need more."
        assert extract_json(raw) == SAMPLE_RESULT

    def test_markdown_fence(self):
        raw = "```json\n" + json.dumps(SAMPLE_RESULT, indent=2) + "\n```"
        assert extract_json(raw) == SAMPLE_RESULT

    def test_nested_object_kept_whole(self):
        payload = {"detected_price": "5", "extra": {"note": "two-for-one"}}
        assert extract_json("x " + json.dumps(payload) + " y") == payload

    def test_subset_and_superset_pass_through(self):
        payload = {"detected_price": 12.5, "surprise": [1, 2]}
        assert extract_json(json.dumps(payload)) == payload

    def test_no_object(self):
        with pytest.raises(ExtractionError) as excinfo:
            extract_json("I could not read a price on this tag.")
        assert excinfo.value.status_code == 500
        assert excinfo.value.raw_text == "I could not read a price on this tag."

    def test_malformed_object(self):
        with pytest.raises(ParseError) as excinfo:
            extract_json('Result: {"detected_price": "10", }')
        assert excinfo.value.message == "Failed to parse price information"

    def test_two_objects_span_is_malformed(self):
        with pytest.raises(ParseError):
            extract_json('{"a": "1"} and {"b": "2"}')


class TestNormalizeResponse:
    def test_attaches_debug_payload(self):
        composed = compose_request("99.99", None, "USD", "Australia")
        raw = "Here you go " + json.dumps(SAMPLE_RESULT)
        result = normalize_response(raw, composed, currency="USD", region="Australia")

        for key, value in SAMPLE_RESULT.items():
            assert result[key] == value
        assert result["debug"] == {
            "request": {
                "currency": "USD",
                "region": "Australia",
                "prompt": composed.prompt,
                "isManualEntry": True,
            },
            "response": raw,
        }
