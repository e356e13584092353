"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from device_export.config import Config
from device_export.fetcher import HTTPFetcher

API_URL = "https://api.test/objects"

SAMPLE_PRODUCTS = [
    {"id": "1", "name": "Google Pixel 6 Pro", "data": {"color": "Cloudy White", "capacity": "128 GB"}},
    {"id": "2", "name": "Apple iPhone 12 Mini, 256GB, Blue", "data": None},
    {"id": "3", "name": "Apple iPhone 12 Pro Max", "data": {"color": "Cloudy White", "capacity GB": 512}},
    {"id": "7", "name": "Apple MacBook Pro 16", "data": {"year": 2019, "price": 1849.99}},
    {"id": "8", "name": "Apple Watch Series 8", "data": {"Strap Colour": "Elderberry", "Case Size": "41mm"}},
    {"id": "10", "name": "Apple iPad Mini 5th Gen", "data": {"Capacity": "64 GB", "Screen size": 7.9}},
    {"id": "12", "name": "Apple iPad Air", "data": {"Generation": "4th", "Price": "519.99"}},
    {"id": "13", "name": "Samsung Galaxy Z Fold2", "data": {"price": 689.99, "color": "Brown"}},
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration tests independent of the developer's environment."""
    for env_var in Config.env_mappings:
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)


@pytest.fixture
def make_fetcher():
    """Build an HTTPFetcher whose requests are answered by ``handler``."""

    def _make(handler, **kwargs):
        return HTTPFetcher(transport=httpx.MockTransport(handler), **kwargs)

    return _make


@pytest.fixture
def json_handler():
    """Handler factory answering every request with ``payload`` as JSON."""

    def _make(payload, status_code=200):
        def handler(request):
            return httpx.Response(status_code, text=json.dumps(payload), headers={"content-type": "application/json"})

        return handler

    return _make
