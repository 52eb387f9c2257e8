import pytest

from location_relay.errors import InvalidFieldError, MissingFieldError, OutOfRangeError, ParseError, ValidationError
from location_relay.validation import validate_location_request


@pytest.mark.parametrize("latitude, longitude", [
    (-90, -180), (90, 180), (0, 0), (35.6899668, 139.6884758), (-89.999, 179.999),
])
def test_accepts_coordinates_in_range(latitude, longitude):
    location = validate_location_request({"latitude": latitude, "longitude": longitude})
    assert location.latitude == latitude
    assert location.longitude == longitude
    assert location.message is None
    assert location.zoom is None
    assert not location.has_pin


@pytest.mark.parametrize("latitude, longitude", [
    (91, 0), (-90.0001, 0), (0, 180.5), (0, -181), (float("nan"), 0), (0, float("inf")),
])
def test_rejects_coordinates_out_of_range(latitude, longitude):
    with pytest.raises(OutOfRangeError):
        validate_location_request({"latitude": latitude, "longitude": longitude})


def test_latitude_checked_before_longitude():
    with pytest.raises(OutOfRangeError, match="latitude"):
        validate_location_request({"latitude": 91, "longitude": 181})


@pytest.mark.parametrize("payload", [
    {"longitude": 10},
    {"latitude": 10},
    {"latitude": "35.6", "longitude": 139.6},
    {"latitude": True, "longitude": 139.6},
    {"latitude": None, "longitude": 139.6},
])
def test_missing_or_non_numeric_coordinates(payload):
    with pytest.raises(MissingFieldError):
        validate_location_request(payload)


@pytest.mark.parametrize("payload", [[1, 2], "latitude", None, 42])
def test_non_object_payload(payload):
    with pytest.raises(ParseError):
        validate_location_request(payload)


def test_full_request():
    location = validate_location_request({
        "latitude": 35.6, "longitude": 139.7,
        "pinLatitude": 35.61, "pinLongitude": 139.71,
        "zoom": 15, "message": "生存報告です！",
    })
    assert location.has_pin
    assert (location.pin_latitude, location.pin_longitude) == (35.61, 139.71)
    assert location.zoom == 15
    assert location.message == "生存報告です！"


@pytest.mark.parametrize("pin", [{"pinLatitude": 35.0}, {"pinLongitude": 139.0}])
def test_rejects_partial_pin(pin):
    with pytest.raises(InvalidFieldError, match="together"):
        validate_location_request({"latitude": 35.0, "longitude": 139.0, **pin})


def test_rejects_pin_out_of_range():
    with pytest.raises(OutOfRangeError):
        validate_location_request({"latitude": 0, "longitude": 0, "pinLatitude": 95, "pinLongitude": 0})


def test_rejects_non_numeric_pin():
    with pytest.raises(InvalidFieldError):
        validate_location_request({"latitude": 0, "longitude": 0, "pinLatitude": "1", "pinLongitude": 2})


@pytest.mark.parametrize("zoom", [-1, 1.5, "15", True])
def test_rejects_bad_zoom(zoom):
    with pytest.raises(InvalidFieldError):
        validate_location_request({"latitude": 0, "longitude": 0, "zoom": zoom})


def test_rejects_non_text_message():
    with pytest.raises(InvalidFieldError):
        validate_location_request({"latitude": 0, "longitude": 0, "message": 123})


def test_null_optionals_are_absent():
    location = validate_location_request({
        "latitude": 0, "longitude": 0, "pinLatitude": None, "pinLongitude": None, "zoom": None, "message": None,
    })
    assert not location.has_pin
    assert location.zoom is None


def test_errors_share_a_base():
    with pytest.raises(ValidationError):
        validate_location_request({"latitude": 100, "longitude": 0})
