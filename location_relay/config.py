import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from location_relay.models import ReferencePoint


class Config:
    MAP_BASE_URL = 'https://maps.google.com/maps'
    DISCORD_API_BASE = 'https://discord.com/api/v10'

    ALLOWED_ORIGINS = (
        'https://survival-report.yuzu-juice.dev',
        'https://survival-report.netlify.app',
        'http://localhost:5173',
    )

    # Shinjuku Central Park
    REFERENCE_LATITUDE = 35.6899668
    REFERENCE_LONGITUDE = 139.6884758
    REFERENCE_LABEL = '新宿中央公園'

    VALIDATION_ERROR_STATUS = 400
    MAX_REQUEST_SIZE = 1048576  # 1 MB

    LOG_FILE = 'app.log'
    HOST = '0.0.0.0'
    PORT = 8000


class RelaySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    discord_bot_token: Optional[str] = None
    discord_channel_id: Optional[str] = None
    enable_cors: bool = True
    enable_distance_report: bool = True
    allowed_origins: Tuple[str, ...] = Config.ALLOWED_ORIGINS
    reference_point: Optional[ReferencePoint] = ReferencePoint(
        latitude=Config.REFERENCE_LATITUDE,
        longitude=Config.REFERENCE_LONGITUDE,
        label=Config.REFERENCE_LABEL,
    )
    map_base_url: str = Config.MAP_BASE_URL
    discord_api_base: str = Config.DISCORD_API_BASE
    validation_error_status: int = Config.VALIDATION_ERROR_STATUS
    max_request_size: int = Config.MAX_REQUEST_SIZE

    @property
    def reports_distance(self) -> bool:
        return self.enable_distance_report and self.reference_point is not None


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _load_reference_point():
    latitude = os.getenv('REFERENCE_LATITUDE')
    longitude = os.getenv('REFERENCE_LONGITUDE')
    label = os.getenv('REFERENCE_LABEL', Config.REFERENCE_LABEL)

    if latitude is None and longitude is None:
        return ReferencePoint(
            latitude=Config.REFERENCE_LATITUDE,
            longitude=Config.REFERENCE_LONGITUDE,
            label=label,
        )
    if not latitude or not longitude:
        # An empty or half-configured reference point switches distance reporting off
        return None
    return ReferencePoint(latitude=float(latitude), longitude=float(longitude), label=label)


def load_settings() -> RelaySettings:
    """Build the process-wide settings from the environment (and a .env file, if any)."""
    load_dotenv()

    origins = os.getenv('ALLOWED_ORIGINS')
    allowed_origins = Config.ALLOWED_ORIGINS
    if origins is not None:
        allowed_origins = tuple(o.strip() for o in origins.split(',') if o.strip())

    return RelaySettings(
        discord_bot_token=os.getenv('DISCORD_BOT_TOKEN'),
        discord_channel_id=os.getenv('DISCORD_CHANNEL_ID'),
        enable_cors=_env_flag('ENABLE_CORS', True),
        enable_distance_report=_env_flag('ENABLE_DISTANCE_REPORT', True),
        allowed_origins=allowed_origins,
        reference_point=_load_reference_point(),
        map_base_url=os.getenv('MAP_BASE_URL', Config.MAP_BASE_URL),
        discord_api_base=os.getenv('DISCORD_API_BASE', Config.DISCORD_API_BASE),
        validation_error_status=int(os.getenv('VALIDATION_ERROR_STATUS', Config.VALIDATION_ERROR_STATUS)),
        max_request_size=int(os.getenv('MAX_REQUEST_SIZE', Config.MAX_REQUEST_SIZE)),
    )
