# places_autocomplete/place_details.py
import logging
from typing import Dict, Optional

from .config import Settings
from .errors import InvalidArgument, InvalidCredentials, InvalidServerResponse, QuotaExceeded
from .http_client import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = "place_id,formatted_address,address_component,geometry"


def parse_components(address_components: list) -> dict:
    """
    Extracts city/state/zip/country from Google's address_components.
    """
    out = {"city": None, "state": None, "zip": None, "country": None}
    for c in address_components or []:
        types = c.get("types", [])
        if "locality" in types:
            out["city"] = c.get("long_name")
        if "administrative_area_level_1" in types:
            out["state"] = c.get("short_name")
        if "postal_code" in types:
            out["zip"] = c.get("long_name")
        if "country" in types:
            out["country"] = c.get("short_name")
    return out


def fetch_place_details(
    client: HttpClient,
    settings: Settings,
    place_id: str,
    session_token: Optional[str] = None,
    fields: str = DEFAULT_FIELDS,
) -> Dict:
    """
    Place Details for a selected prediction.
    Passing the autocomplete session token closes the billing session.
    """
    params = {
        "place_id": place_id,
        "fields": fields,
        "key": settings.api_key,
    }
    if settings.language is not None:
        params["language"] = settings.language
    if settings.region is not None:
        params["region"] = settings.region
    if session_token is not None:
        params["sessiontoken"] = session_token

    data = client.get_json(settings.details_url, params=params)

    status = data.get("status")
    msg = data.get("error_message")
    if status == "OK":
        return data.get("result", {}) or {}

    logger.warning("Place Details returned %s for %s", status, place_id)
    if status in ("INVALID_REQUEST", "NOT_FOUND"):
        raise InvalidArgument(f"Place Details error for {place_id}: status={status}, msg={msg}")
    if status == "REQUEST_DENIED" and msg == "The provided API key is invalid.":
        raise InvalidCredentials(f"API key is invalid (Place Details for {place_id})")
    if status == "OVER_QUERY_LIMIT":
        raise QuotaExceeded(f"Daily quota exceeded (Place Details for {place_id})")
    raise InvalidServerResponse(f"Place Details error for {place_id}: status={status}, msg={msg}")
