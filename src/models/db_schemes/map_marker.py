from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum
from helpers.geolocation import UserLocation

class MarkerType(Enum):
    DOCTOR = "doctor"
    HOSPITAL = "hospital"

class MapMarker(BaseModel):
    id: str
    position: UserLocation
    title: str
    type: MarkerType
    specialty: Optional[str] = None
    distance: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    is_recommended: bool = Field(default=False, alias="isRecommended")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
