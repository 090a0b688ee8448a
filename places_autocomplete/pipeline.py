# places_autocomplete/pipeline.py
import logging
import os
import uuid
from typing import Optional

from .autocomplete import GoogleMapsPlacesAutocomplete
from .config import load_settings
from .exporters import ensure_dir, export_predictions_csv
from .geo import bounds_around, miles_to_meters
from .http_client import HttpClient, quiet_transport_loggers
from .models import GeocodeQuery, PlacePrediction, PredictionCollection
from .place_details import fetch_place_details, parse_components

logger = logging.getLogger(__name__)


def build_query(text: str, center: str = "", radius_miles: str = "", session_token: Optional[str] = None) -> GeocodeQuery:
    """Turn raw prompt answers into a GeocodeQuery. Center is 'lat,lon'; blanks are ignored."""
    query = GeocodeQuery.create(text)

    if center.strip():
        lat_s, lon_s = center.split(",", 1)
        miles = float(radius_miles) if radius_miles.strip() else 10.0
        radius_m = miles_to_meters(miles)
        query = query.with_bounds(bounds_around(float(lat_s), float(lon_s), radius_m))
        query = query.with_data("radius", int(radius_m))

    if session_token:
        query = query.with_data("sessiontoken", session_token)
    return query


def pick_prediction(predictions: PredictionCollection) -> Optional[PlacePrediction]:
    """Ask for a 1-based pick until it is valid; blank means skip."""
    while True:
        choice = input("\nPick a number to resolve (blank to skip): ").strip()
        if not choice:
            return None
        if choice.isdigit() and 1 <= int(choice) <= len(predictions):
            return predictions[int(choice) - 1]
        print(f"Please enter a number between 1 and {len(predictions)}.")


def run(settings=None):
    settings = settings or load_settings()
    client = HttpClient(timeout_sec=settings.timeout_sec, sleep_sec=settings.sleep_between_requests_sec)
    provider = GoogleMapsPlacesAutocomplete.from_settings(client, settings)
    session_token = str(uuid.uuid4())

    print("\n=== Google Places Autocomplete ===\n")
    text = input("Enter an address or place (example: 'Lewisville, TX'): ").strip()
    center = input("Optional bias center 'lat,lon' (blank for none): ").strip()
    radius_miles = input("Bias radius in miles (default 10): ").strip() if center else ""

    query = build_query(text, center, radius_miles, session_token)
    logger.debug("Query built (bounds=%s, data keys=%s)", query.bounds, sorted(query.data))
    predictions = provider.query(query)

    if predictions.is_empty():
        print("\nNo predictions returned.\n")
        return

    print()
    for i, p in enumerate(predictions, start=1):
        print(f"{i:>2}. {p.description}  [{', '.join(p.types)}]")

    ensure_dir(settings.data_processed_dir)
    out_csv = os.path.join(settings.data_processed_dir, "predictions.csv")
    export_predictions_csv(predictions, out_csv)
    print(f"\nSaved {len(predictions)} predictions -> {out_csv}")

    selected = pick_prediction(predictions)
    if selected is None:
        return

    details = fetch_place_details(client, settings, selected.place_id, session_token=session_token)
    comp = parse_components(details.get("address_components", []))
    loc = (details.get("geometry") or {}).get("location") or {}
    print(
        f"\nResolved: {details.get('formatted_address') or selected.description}\n"
        f"Lat/Lon: {loc.get('lat')}, {loc.get('lng')} | "
        f"City: {comp['city']} | State: {comp['state']} | ZIP: {comp['zip']} | Country: {comp['country']}\n"
    )


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    quiet_transport_loggers()
    run(settings)


if __name__ == "__main__":
    main()
