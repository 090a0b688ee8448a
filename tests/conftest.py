"""
Shared pytest fixtures: a fake transport and ready-made providers.
"""

import json
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from places_autocomplete.autocomplete import GoogleMapsPlacesAutocomplete
from places_autocomplete.config import Settings

API_KEY = "secret-test-key"


def make_transport(payload):
    """MagicMock transport whose get_text returns payload (dicts are JSON-encoded)."""
    transport = MagicMock()
    body = json.dumps(payload) if isinstance(payload, (dict, list)) else payload
    transport.get_text.return_value = body
    return transport


def sent_params(transport):
    """Query params of the last URL passed to the transport, as a flat dict."""
    url = transport.get_text.call_args[0][0]
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query, keep_blank_values=True).items()}


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, region="us", language="en")


@pytest.fixture
def ok_transport():
    return make_transport({"status": "ZERO_RESULTS", "predictions": []})


@pytest.fixture
def provider(ok_transport):
    return GoogleMapsPlacesAutocomplete(ok_transport, API_KEY)
