# places_autocomplete/config.py
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    api_key: str
    region: Optional[str] = None
    language: str = "en"
    timeout_sec: int = 20

    # Google endpoints
    details_url: str = "https://maps.googleapis.com/maps/api/place/details/json"

    # Pacing between calls (0 = none)
    sleep_between_requests_sec: float = 0.0

    # Export paths
    data_processed_dir: str = "data/processed"

    log_level: str = "INFO"

    def __repr__(self) -> str:
        # keep the key out of logs and tracebacks
        return (
            f"Settings(api_key='***', region={self.region!r}, language={self.language!r}, "
            f"timeout_sec={self.timeout_sec!r}, log_level={self.log_level!r})"
        )


def load_settings() -> Settings:
    # Optional local .env; real environment variables win
    load_dotenv(override=False)

    key = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()

    if not key:
        raise ValueError(
            "Missing GOOGLE_MAPS_API_KEY.\n"
            "Add it to a .env file locally or set it in your environment.\n"
            "Example (local): export GOOGLE_MAPS_API_KEY='YOUR_KEY'"
        )

    region = os.getenv("GOOGLE_MAPS_REGION", "").strip() or None
    language = os.getenv("GOOGLE_MAPS_LANGUAGE", "").strip() or "en"
    timeout_sec = int(os.getenv("HTTP_TIMEOUT_SEC", "20").strip() or 20)
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        api_key=key,
        region=region,
        language=language,
        timeout_sec=timeout_sec,
        log_level=log_level,
    )
