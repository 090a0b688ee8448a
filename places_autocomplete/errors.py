# places_autocomplete/errors.py
import re
from typing import Optional

_KEY_RE = re.compile(r"([?&]key=)[^&\s'\")]*")


def redact_url(url: str) -> str:
    """Replace the value of every `key` query parameter in url (or a message quoting one) with ***."""
    return _KEY_RE.sub(r"\1***", url)


class GeocoderError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(GeocoderError, ValueError):
    """Caller misuse, or the upstream API flagged the request as invalid."""


class InvalidCredentials(GeocoderError):
    """The upstream API rejected the API key."""


class QuotaExceeded(GeocoderError):
    """The upstream API reported quota exhaustion."""


class CollectionIsEmpty(GeocoderError):
    pass


class InvalidServerResponse(GeocoderError):
    """Malformed upstream response, or access denied for a reason other than the key."""

    @classmethod
    def create(cls, url: str, status_code: Optional[int] = None) -> "InvalidServerResponse":
        if status_code is None:
            return cls(f"The geocoder server returned an invalid response for query {redact_url(url)!r}.")
        return cls(
            f"The geocoder server returned an invalid response ({status_code}) "
            f"for query {redact_url(url)!r}. We could not parse it."
        )

    @classmethod
    def empty_response(cls, url: str) -> "InvalidServerResponse":
        return cls(f"The geocoder server returned an empty response for query {redact_url(url)!r}.")
