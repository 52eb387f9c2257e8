import math

from location_relay.errors import InvalidFieldError, MissingFieldError, OutOfRangeError, ParseError
from location_relay.models import LocationRequest

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def is_number(value):
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_range(name, value, bounds):
    low, high = bounds
    if value < low or value > high or not math.isfinite(value):
        raise OutOfRangeError(f"Invalid {name}: must be between {low:g} and {high:g}")


def _validate_pin(payload):
    pin_latitude = payload.get('pinLatitude')
    pin_longitude = payload.get('pinLongitude')

    if pin_latitude is None and pin_longitude is None:
        return None, None
    if pin_latitude is None or pin_longitude is None:
        raise InvalidFieldError("Invalid pin: pinLatitude and pinLongitude must be provided together")
    if not is_number(pin_latitude) or not is_number(pin_longitude):
        raise InvalidFieldError("Invalid pin: pinLatitude and pinLongitude must be numbers")

    check_range('pinLatitude', pin_latitude, LATITUDE_RANGE)
    check_range('pinLongitude', pin_longitude, LONGITUDE_RANGE)
    return pin_latitude, pin_longitude


def validate_location_request(payload):
    """
    Validate a decoded JSON body and turn it into a LocationRequest.

    Raises ParseError when the body is not a JSON object, MissingFieldError when
    latitude/longitude are absent or not numbers, OutOfRangeError when a
    coordinate is non-finite or outside WGS84 bounds, and InvalidFieldError for
    malformed optional fields (partial pin, bad zoom, non-text message).
    """
    if not isinstance(payload, dict):
        raise ParseError()

    latitude = payload.get('latitude')
    longitude = payload.get('longitude')
    if not is_number(latitude) or not is_number(longitude):
        raise MissingFieldError("Missing required parameters: latitude and longitude must be provided")

    check_range('latitude', latitude, LATITUDE_RANGE)
    check_range('longitude', longitude, LONGITUDE_RANGE)

    pin_latitude, pin_longitude = _validate_pin(payload)

    zoom = payload.get('zoom')
    if zoom is not None and (not isinstance(zoom, int) or isinstance(zoom, bool) or zoom < 0):
        raise InvalidFieldError("Invalid zoom: must be a non-negative integer")

    message = payload.get('message')
    if message is not None and not isinstance(message, str):
        raise InvalidFieldError("Invalid message: must be a string")

    return LocationRequest(
        latitude=latitude,
        longitude=longitude,
        pin_latitude=pin_latitude,
        pin_longitude=pin_longitude,
        zoom=zoom,
        message=message,
    )
