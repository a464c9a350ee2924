import numpy as np
import pytest
from pydantic import ValidationError

from geocoords.city import City
from geocoords.coordinates import Latitude, Longitude
from geocoords.exceptions import GCMissingCoordinates


def test_render(wroclaw):
    assert isinstance(wroclaw.latitude, Latitude)
    assert isinstance(wroclaw.longitude, Longitude)
    assert wroclaw.has_coordinates
    assert wroclaw.render() == "Wrocław - 51.1° N, 17.03° W"
    assert str(wroclaw) == "Wrocław - 51.1° N, 17.03° W"


@pytest.mark.parametrize(
    "latitude, longitude, expected",
    [
        (-33.87, -151.21, "Sydney - -33.87° S, -151.21° E"),
        (0, 0, "Sydney - 0° , 0° "),
        (Latitude(-90), Longitude(180), "Sydney - -90° S, 180° W"),
    ],
)
def test_render_directions(latitude, longitude, expected):
    assert str(City(name="Sydney", latitude=latitude, longitude=longitude)) == expected


def test_set_coordinates_after_construction():
    city = City(name="Wrocław")
    assert city.latitude is None
    assert city.longitude is None
    assert not city.has_coordinates

    city.latitude = 51.1
    assert city.latitude == Latitude(51.1)
    assert not city.has_coordinates

    city.longitude = Longitude(17.03)
    assert city.has_coordinates
    assert str(city) == "Wrocław - 51.1° N, 17.03° W"


def test_missing_coordinates():
    city = City(name="Wrocław")
    with pytest.raises(GCMissingCoordinates, match="latitude and longitude"):
        city.render()

    city.latitude = 51.1
    with pytest.raises(GCMissingCoordinates, match="has no longitude"):
        str(city)


def test_out_of_range_coordinates():
    with pytest.raises(ValidationError):
        City(name="Nowhere", latitude=91)
    with pytest.raises(ValidationError):
        City(name="Nowhere", longitude=-180.5)

    city = City(name="Wrocław", latitude=51.1)
    with pytest.raises(ValidationError):
        city.latitude = 100
    assert city.latitude == Latitude(51.1)


@pytest.mark.parametrize("latitude", [Longitude(10), "51.1", [51.1]])
def test_invalid_coordinate_types(latitude):
    with pytest.raises(ValidationError):
        City(name="Nowhere", latitude=latitude)


def test_model_config():
    city = City(name="  Wrocław ")
    assert city.name == "Wrocław"
    with pytest.raises(ValidationError):
        city.name = "Breslau"  # type: ignore
    with pytest.raises(ValidationError):
        City(name="Wrocław", population=672929)  # type: ignore


def test_serialization():
    city = City(name="Wrocław", latitude=np.float32(51.5), longitude=17)
    expected = {"name": "Wrocław", "latitude": 51.5, "longitude": 17}
    assert city.model_dump() == expected
    assert city.model_dump(mode="json") == expected
    assert City(name="Wrocław").model_dump() == {
        "name": "Wrocław",
        "latitude": None,
        "longitude": None,
    }


def test_round_trip_through_dump(wroclaw):
    restored = City(**wroclaw.model_dump())
    assert restored == wroclaw


def test_pprint(wroclaw, capsys):
    wroclaw.pprint()
    out = capsys.readouterr().out
    assert "City" in out
    assert "Wrocław" in out


def test_deep_copy(wroclaw):
    duplicate = wroclaw.model_copy(deep=True)
    assert duplicate == wroclaw
    assert str(duplicate) == "Wrocław - 51.1° N, 17.03° W"
    duplicate.latitude = -10
    assert wroclaw.latitude == Latitude(51.1)
