"""Unit tests for the query and result models."""

import dataclasses

import pytest

from places_autocomplete.errors import CollectionIsEmpty, InvalidServerResponse
from places_autocomplete.models import (
    AutocompleteResponse,
    Bounds,
    GeocodeQuery,
    PlacePrediction,
    PredictionCollection,
)


def test_query_builders_return_new_instances():
    base = GeocodeQuery.create("Seattle")
    with_token = base.with_data("sessiontoken", "abc")
    bounded = with_token.with_bounds(Bounds(1, 2, 3, 4))

    assert base.get_data("sessiontoken") is None
    assert with_token.get_data("sessiontoken") == "abc"
    assert bounded.bounds == Bounds(1, 2, 3, 4)
    assert bounded.get_data("sessiontoken") == "abc"
    assert base.bounds is None


def test_query_is_frozen():
    q = GeocodeQuery.create("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        q.text = "y"


def test_get_data_default():
    assert GeocodeQuery.create("x").get_data("radius", 10) == 10


def test_prediction_from_api():
    p = PlacePrediction.from_api({"description": "A", "place_id": "p1", "types": ["x", "y"], "extra": 1})
    assert p == PlacePrediction("A", "p1", ("x", "y"))


@pytest.mark.parametrize("missing", ["description", "place_id", "types"])
def test_prediction_requires_all_fields(missing):
    entry = {"description": "A", "place_id": "p1", "types": ["x"]}
    del entry[missing]
    with pytest.raises(InvalidServerResponse, match=missing):
        PlacePrediction.from_api(entry)


def test_collection_behaviour():
    a = PlacePrediction("A", "p1", ("x",))
    b = PlacePrediction("B", "p2", ("y",))
    coll = PredictionCollection([a, b])

    assert len(coll) == 2
    assert list(coll) == [a, b]
    assert coll[1] is b
    assert coll.first() is a
    assert not coll.is_empty()
    assert coll.all() == [a, b]
    assert coll.to_records() == [
        {"description": "A", "place_id": "p1", "types": ["x"]},
        {"description": "B", "place_id": "p2", "types": ["y"]},
    ]


def test_empty_collection():
    coll = PredictionCollection()
    assert len(coll) == 0
    assert coll.is_empty()
    assert not coll
    with pytest.raises(CollectionIsEmpty):
        coll.first()


def test_response_tolerates_missing_fields():
    resp = AutocompleteResponse.from_json({})
    assert resp.status is None
    assert resp.error_message is None
    assert resp.predictions == []


def test_response_ignores_non_list_predictions():
    resp = AutocompleteResponse.from_json({"status": "OK", "predictions": "nope"})
    assert resp.predictions == []


def test_prediction_types_cannot_be_mutated():
    p = PlacePrediction.from_api({"description": "A", "place_id": "p1", "types": ["x"]})
    assert isinstance(p.types, tuple)
    with pytest.raises(AttributeError):
        p.types.append("y")


@pytest.mark.parametrize("types", ["geocode", {"a": 1}, 5])
def test_prediction_rejects_non_list_types(types):
    with pytest.raises(InvalidServerResponse, match="types must be a list"):
        PlacePrediction.from_api({"description": "A", "place_id": "p1", "types": types})
