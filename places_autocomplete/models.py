# places_autocomplete/models.py
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .errors import CollectionIsEmpty, InvalidServerResponse


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float


@dataclass(frozen=True)
class GeocodeQuery:
    """
    Free-text search plus optional bounds and auxiliary data.
    Recognised data keys: radius, location, sessiontoken.
    """
    text: str
    bounds: Optional[Bounds] = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, text: str) -> "GeocodeQuery":
        return cls(text=text)

    def with_bounds(self, bounds: Bounds) -> "GeocodeQuery":
        return replace(self, bounds=bounds)

    def with_data(self, name: str, value: Any) -> "GeocodeQuery":
        data = dict(self.data)
        data[name] = value
        return replace(self, data=data)

    def get_data(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)


@dataclass(frozen=True)
class PlacePrediction:
    description: str
    place_id: str
    types: Tuple[str, ...]

    @classmethod
    def from_api(cls, entry: Mapping[str, Any]) -> "PlacePrediction":
        missing = [k for k in ("description", "place_id", "types") if entry.get(k) is None]
        if missing:
            raise InvalidServerResponse(
                f"Prediction entry is missing required fields: {', '.join(missing)}"
            )
        if not isinstance(entry["types"], list):
            raise InvalidServerResponse(
                f"Prediction types must be a list, got {type(entry['types']).__name__}"
            )
        return cls(
            description=entry["description"],
            place_id=entry["place_id"],
            types=tuple(entry["types"]),
        )


class PredictionCollection:
    """Ordered, possibly empty, sequence of predictions in API response order."""

    def __init__(self, predictions: Optional[Sequence[PlacePrediction]] = None):
        self._predictions: List[PlacePrediction] = list(predictions or [])

    def __len__(self) -> int:
        return len(self._predictions)

    def __iter__(self) -> Iterator[PlacePrediction]:
        return iter(self._predictions)

    def __getitem__(self, index: int) -> PlacePrediction:
        return self._predictions[index]

    def __repr__(self) -> str:
        return f"PredictionCollection({self._predictions!r})"

    def is_empty(self) -> bool:
        return not self._predictions

    def first(self) -> PlacePrediction:
        if not self._predictions:
            raise CollectionIsEmpty("The collection is empty.")
        return self._predictions[0]

    def all(self) -> List[PlacePrediction]:
        return list(self._predictions)

    def to_records(self) -> List[Dict[str, Any]]:
        return [
            {"description": p.description, "place_id": p.place_id, "types": list(p.types)}
            for p in self._predictions
        ]


@dataclass(frozen=True)
class AutocompleteResponse:
    status: Optional[str] = None
    error_message: Optional[str] = None
    predictions: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AutocompleteResponse":
        preds = data.get("predictions") or []
        if not isinstance(preds, list):
            preds = []
        return cls(
            status=data.get("status"),
            error_message=data.get("error_message"),
            predictions=preds,
        )
