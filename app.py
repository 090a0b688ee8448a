# app.py
import logging
import uuid

import requests
import streamlit as st

from places_autocomplete.autocomplete import GoogleMapsPlacesAutocomplete
from places_autocomplete.config import load_settings
from places_autocomplete.errors import GeocoderError
from places_autocomplete.exporters import predictions_dataframe
from places_autocomplete.geo import bounds_around, miles_to_meters
from places_autocomplete.http_client import HttpClient, quiet_transport_loggers
from places_autocomplete.models import GeocodeQuery
from places_autocomplete.place_details import fetch_place_details, parse_components

# -------------------------
# Streamlit page setup
# -------------------------
st.set_page_config(page_title="Google Places Autocomplete", layout="wide")
st.title("Google Places Autocomplete")

# Validate API key early
try:
    settings = load_settings()
except ValueError as e:
    st.error(str(e))
    st.stop()

logging.basicConfig(level=settings.log_level)
quiet_transport_loggers()

client = HttpClient(timeout_sec=settings.timeout_sec, sleep_sec=settings.sleep_between_requests_sec)
provider = GoogleMapsPlacesAutocomplete.from_settings(client, settings)

# -------------------------
# Session state (one billing session per pick)
# -------------------------
if "session_token" not in st.session_state:
    st.session_state.session_token = str(uuid.uuid4())

# -------------------------
# UI Inputs
# -------------------------
user_input = st.text_input("City/Address", "Plano, TX")

use_bias = st.checkbox("Bias results around a point")
bounds = None
radius_m = None
if use_bias:
    c1, c2, c3 = st.columns(3)
    lat = c1.number_input("Latitude", min_value=-90.0, max_value=90.0, value=33.0198, format="%.5f")
    lon = c2.number_input("Longitude", min_value=-180.0, max_value=180.0, value=-96.6989, format="%.5f")
    radius_miles = c3.number_input("Radius (miles)", min_value=1, max_value=200, value=10, step=1)
    radius_m = miles_to_meters(radius_miles)
    bounds = bounds_around(lat, lon, radius_m)

st.caption("Tip: Type at least 3 characters to see address suggestions.")

predictions = None

if user_input and len(user_input.strip()) >= 3:
    query = GeocodeQuery.create(user_input.strip()).with_data("sessiontoken", st.session_state.session_token)
    if bounds is not None:
        query = query.with_bounds(bounds).with_data("radius", int(radius_m))

    try:
        predictions = provider.query(query)
    except (GeocoderError, requests.RequestException) as e:
        st.warning(f"Autocomplete unavailable: {e}")

if predictions is not None and predictions.is_empty():
    st.info("No suggestions for this input.")

if predictions:
    df = predictions_dataframe(predictions)
    st.dataframe(df, use_container_width=True)

    selected = st.selectbox(
        "Select the best match",
        options=predictions.all(),
        format_func=lambda p: p.description,
        key="location_selectbox",
    )

    st.download_button(
        "Download predictions.csv",
        df.to_csv(index=False).encode("utf-8"),
        "predictions.csv",
        "text/csv",
    )

    if st.button("Resolve selection") and selected is not None:
        try:
            details = fetch_place_details(
                client, settings, selected.place_id, session_token=st.session_state.session_token
            )
        except (GeocoderError, requests.RequestException) as e:
            st.error(f"Could not resolve selection. Details: {e}")
            st.stop()

        # details call ends the session; start a fresh one
        st.session_state.session_token = str(uuid.uuid4())

        loc = (details.get("geometry") or {}).get("location") or {}
        comp = parse_components(details.get("address_components", []))
        st.success(
            f"Resolved Address: {details.get('formatted_address') or selected.description} | "
            f"Lat/Lon: {loc.get('lat')}, {loc.get('lng')} | "
            f"City: {comp.get('city')} | State: {comp.get('state')} | ZIP: {comp.get('zip')}"
        )
