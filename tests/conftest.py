"""Shared fixtures for API tests.

Uses FastAPI TestClient (in-memory, no network) with a fake model client,
so tests run without credentials for any provider.
"""

from __future__ import annotations

import json
from typing import List

import pytest

from pricetag.app.settings import Settings
from pricetag.inference.model_client import GenerationConfig, ModelClient, Part

SAMPLE_RESULT = {
    "detected_price": "99.99",
    "original_currency": "AUD",
    "converted_price": "65.50",
    "applicable_tax_rate": "0%",
    "applicable_taxes": "0.00",
    "total_price_local": "99.99",
    "total_price": "65.50",
}


class FakeModelClient(ModelClient):
    """Records every call and replies with a canned response or exception."""

    provider_name = "fake"
    model_name = "fake-model"

    def __init__(self, response: str | None = None, error: Exception | None = None):
        self.response = response if response is not None else json.dumps(SAMPLE_RESULT)
        self.error = error
        self.calls: List[tuple[List[Part], GenerationConfig]] = []

    def generate(self, parts, config):
        self.calls.append((parts, config))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        model_provider="gemini",
        gemini_api_key="test-key",
        secrets_manager_secret_name=None,
    )


@pytest.fixture()
def fake_model():
    return FakeModelClient()


@pytest.fixture()
def make_client(settings):
    """Build a TestClient around an app wired to the given fake model."""
    from fastapi.testclient import TestClient

    from pricetag.app.main import create_app

    def _make(model: ModelClient, app_settings: Settings | None = None) -> TestClient:
        return TestClient(create_app(app_settings or settings, model_client=model))

    return _make


@pytest.fixture()
def client(make_client, fake_model):
    return make_client(fake_model)
