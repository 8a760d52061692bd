from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import logging

logger = logging.getLogger("uvicorn")


class UserLocation(BaseModel):
    lat: float
    lng: float


DEFAULT_MELBOURNE_LOCATION = UserLocation(lat=-37.8136, lng=144.9631)

DEFAULT_LOCATION_NOTICE = (
    "Showing results for a default location in Melbourne "
    "as your precise location could not be determined."
)


class LocationError(Exception):
    """Raised when the current position is denied or unavailable."""


class LocationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: UserLocation
    is_default: bool = Field(default=False, alias="isDefaultLocation")
    notice: Optional[str] = None


class LocationProvider:
    def get_current_location(self) -> UserLocation:
        raise NotImplementedError


class ClientCoordinatesProvider(LocationProvider):
    """
    Location reported by the client (browser geolocation forwarded as query params).
    Missing coordinates mean the user denied access or the browser has no support.
    """

    def __init__(self, lat: Optional[float] = None, lng: Optional[float] = None):
        self.lat = lat
        self.lng = lng

    def get_current_location(self) -> UserLocation:
        if self.lat is None or self.lng is None:
            raise LocationError("Geolocation is not available or permission was denied.")
        if not -90 <= self.lat <= 90 or not -180 <= self.lng <= 180:
            raise LocationError(f"Geolocation error: invalid coordinates ({self.lat}, {self.lng}).")
        return UserLocation(lat=self.lat, lng=self.lng)


def locate_user(provider: LocationProvider,
                default_location: UserLocation = DEFAULT_MELBOURNE_LOCATION) -> LocationResult:
    """Current location, or the default location flagged as such when it cannot be determined."""
    try:
        location = provider.get_current_location()
        return LocationResult(location=location)
    except LocationError as e:
        logger.warning(f"Falling back to default location: {e}")
        return LocationResult(
            location=default_location,
            is_default=True,
            notice=f"{e} {DEFAULT_LOCATION_NOTICE}",
        )
