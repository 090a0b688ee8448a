# places_autocomplete/autocomplete.py
import json
import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import requests

from .config import Settings
from .errors import (
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    redact_url,
)
from .models import AutocompleteResponse, GeocodeQuery, PlacePrediction, PredictionCollection

logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = "The provided API key is invalid."


class Transport(Protocol):
    def get_text(self, url: str) -> str: ...


@runtime_checkable
class AutocompleteProvider(Protocol):
    def query(self, query: GeocodeQuery) -> PredictionCollection: ...

    def reverse_query(self, *args: Any, **kwargs: Any) -> PredictionCollection: ...

    def get_name(self) -> str: ...


def _coord(value: float) -> str:
    # 14 significant digits, integral values without ".0"
    return format(value, ".14g")


def _param_value(value: Any) -> Any:
    # Google expects lowercase booleans
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class GoogleMapsPlacesAutocomplete:
    """Google Places Autocomplete as a geocoding-style provider."""

    ENDPOINT_URL_SSL = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    NAME = "google_maps_places_autocomplete"

    def __init__(
        self,
        client: Transport,
        api_key: str,
        region: Optional[str] = None,
        language: Optional[str] = "en",
    ):
        if client is None:
            raise InvalidArgument("An HTTP client is required.")
        self._client = client
        self._api_key = api_key
        self._region = region
        self._language = language

    @classmethod
    def from_settings(cls, client: Transport, settings: Settings) -> "GoogleMapsPlacesAutocomplete":
        return cls(client, settings.api_key, region=settings.region, language=settings.language)

    def __repr__(self) -> str:
        return f"GoogleMapsPlacesAutocomplete(region={self._region!r}, language={self._language!r})"

    @property
    def region(self) -> Optional[str]:
        return self._region

    @property
    def language(self) -> Optional[str]:
        return self._language

    def get_region(self) -> Optional[str]:
        return self._region

    def get_locale(self) -> Optional[str]:
        return self._language

    def get_name(self) -> str:
        return self.NAME

    def query(self, query: GeocodeQuery) -> PredictionCollection:
        return self._fetch_url(self.build_params(query))

    def reverse_query(self, *args: Any, **kwargs: Any) -> PredictionCollection:
        raise InvalidArgument("Reverse Query not supported")

    def build_params(self, query: GeocodeQuery) -> Dict[str, Any]:
        """Request parameters for a query, without the API key."""
        params: Dict[str, Any] = {
            "input": query.text,
            "types": "geocode",
        }

        if self._language is not None:
            params["language"] = self._language

        if self._region is not None:
            params["region"] = self._region

        if query.get_data("radius") is not None:
            params["radius"] = query.get_data("radius")

        # bounds become a location bias rectangle, south,west|north,east
        if query.bounds is not None:
            b = query.bounds
            params["locationbias"] = "rectangle:%s,%s|%s,%s" % (
                _coord(b.south), _coord(b.west), _coord(b.north), _coord(b.east)
            )

        # NOTE: "location" is both the strict-bounds flag and the sent value, so this sends "true"
        if query.get_data("location") is True:
            params["location"] = query.get_data("location")
            params["strictbounds"] = True

        if query.get_data("sessiontoken") is not None:
            params["sessiontoken"] = query.get_data("sessiontoken")

        return params

    def build_url(self, params: Dict[str, Any]) -> str:
        full = dict(params)
        full["key"] = self._api_key
        encoded = {k: _param_value(v) for k, v in full.items()}
        return requests.Request("GET", self.ENDPOINT_URL_SSL, params=encoded).prepare().url

    def _fetch_url(self, params: Dict[str, Any]) -> PredictionCollection:
        url = self.build_url(params)

        content = self._client.get_text(url)
        response = self._validate_response(url, content)

        if not response.predictions or response.status != "OK":
            logger.info("No predictions (status=%s) for %s", response.status, redact_url(url))
            return PredictionCollection([])

        results = [PlacePrediction.from_api(entry) for entry in response.predictions]
        logger.info("Got %d predictions for %s", len(results), redact_url(url))
        return PredictionCollection(results)

    def _validate_response(self, url: str, content: Any) -> AutocompleteResponse:
        safe_url = redact_url(url)
        try:
            data = json.loads(content)
        except (TypeError, ValueError):
            raise InvalidServerResponse.create(url)

        # API error
        if not isinstance(data, dict):
            raise InvalidServerResponse.create(url)

        response = AutocompleteResponse.from_json(data)
        status = response.status

        if status in ("INVALID_REQUEST", "REQUEST_DENIED", "OVER_QUERY_LIMIT"):
            logger.warning("Autocomplete returned %s for %s", status, safe_url)

        if status == "INVALID_REQUEST":
            raise InvalidArgument(f"Invalid Request {safe_url}")

        if status == "REQUEST_DENIED" and response.error_message == INVALID_KEY_MESSAGE:
            raise InvalidCredentials(f"API key is invalid {safe_url}")

        if status == "REQUEST_DENIED":
            raise InvalidServerResponse(
                f"API access denied. Request: {safe_url} - Message: {response.error_message}"
            )

        if status == "OVER_QUERY_LIMIT":
            raise QuotaExceeded(f"Daily quota exceeded {safe_url}")

        return response
