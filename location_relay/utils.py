import logging
import logging.config

from location_relay.config import Config
from location_relay.geo import distance_to_reference
from location_relay.models import MapUrlSpec, Notification

DISTANCE_LINE = "{label}からの距離: {distance_km:.2f} km"


def format_coordinate(value):
    """Render a number the way a browser would print it: 35.0 -> '35', 35.5 -> '35.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_map_url(spec: MapUrlSpec, base_url=Config.MAP_BASE_URL):
    """
    Build a Google Maps URL for a location.

    :param spec: Center coordinates plus optional pin and zoom.
    :param base_url: Map viewer endpoint.
    :return: URL centered on the location, with a marker and zoom when given.
    """
    url = f"{base_url}?ll={format_coordinate(spec.latitude)},{format_coordinate(spec.longitude)}"

    if spec.pin is not None:
        pin_latitude, pin_longitude = spec.pin
        url += f"&q={format_coordinate(pin_latitude)},{format_coordinate(pin_longitude)}"

    if spec.zoom is not None:
        url += f"&z={spec.zoom}"

    return url


def format_notification(message, map_url, distance_m=None, reference_label=Config.REFERENCE_LABEL):
    """
    Compose the chat message text.

    Lines are the optional user message, the map URL and, when a distance is
    given, the distance to the reference point in kilometers.
    """
    lines = []
    if message:
        lines.append(message)
    lines.append(map_url)
    if distance_m is not None:
        lines.append(DISTANCE_LINE.format(label=reference_label, distance_km=distance_m / 1000))
    return "\n".join(lines)


def compose_notification(location, settings):
    """Turn a validated LocationRequest into the Notification to send."""
    spec = MapUrlSpec.from_location(location)
    url = build_map_url(spec, base_url=settings.map_base_url)

    distance_m = None
    reference_label = Config.REFERENCE_LABEL
    if settings.reports_distance:
        distance_m = distance_to_reference((location.latitude, location.longitude), settings.reference_point)
        reference_label = settings.reference_point.label

    text = format_notification(location.message, url, distance_m=distance_m, reference_label=reference_label)
    return Notification(text=text, url=url, distance_m=distance_m)


def setup_logging(log_file=Config.LOG_FILE):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    uvicorn_log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(levelname)s - %(message)s",
            },
            "uvicorn": {
                "format": "%(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
            "file": {
                "formatter": "default",
                "class": "logging.FileHandler",
                "filename": log_file,
            },
            "uvicorn": {
                "formatter": "uvicorn",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"handlers": ["default", "file"], "level": "INFO"},
            "uvicorn": {"handlers": ["uvicorn", "file"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": ["default", "file"], "level": "INFO", "propagate": True},
            "uvicorn.access": {"handlers": ["default", "file"], "level": "INFO", "propagate": False},
        },
    }

    logging.config.dictConfig(uvicorn_log_config)
