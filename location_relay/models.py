from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class LocationRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float
    longitude: float
    pin_latitude: Optional[float] = Field(default=None, alias="pinLatitude")
    pin_longitude: Optional[float] = Field(default=None, alias="pinLongitude")
    zoom: Optional[int] = Field(default=None, ge=0)
    message: Optional[str] = None

    @property
    def has_pin(self) -> bool:
        return self.pin_latitude is not None and self.pin_longitude is not None


class MapUrlSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    pin: Optional[Tuple[float, float]] = None
    zoom: Optional[int] = None

    @classmethod
    def from_location(cls, location: LocationRequest) -> "MapUrlSpec":
        pin = None
        if location.has_pin:
            pin = (location.pin_latitude, location.pin_longitude)
        return cls(latitude=location.latitude, longitude=location.longitude, pin=pin, zoom=location.zoom)


class ReferencePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    label: str


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    url: str
    distance_m: Optional[float] = None


class LocationResponse(BaseModel):
    message: str
    url: str


class ErrorResponse(BaseModel):
    error: str
