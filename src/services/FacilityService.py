from .BaseService import BaseService
from helpers.geolocation import (
    UserLocation, LocationProvider, LocationResult, locate_user,
)
from models.db_schemes import MapMarker, MarkerType
from typing import List, Optional
import logging

logger = logging.getLogger('uvicorn.error')

DEFAULT_MAP_ZOOM = 13

# Mock listings, placed relative to the map center.
DOCTOR_LISTINGS = [
    {
        "id": "doc1", "lat_offset": 0.01, "lng_offset": 0.01,
        "title": "Northside General Clinic",
        "specialty": "General Practitioner",
        "distance": "1.2 km",
        "website": "https://example.com/northside",
        "phone": "(03) 9123 4567",
        "description": "Accepting new patients. Bulk billing available for eligible patients.",
    },
    {
        "id": "doc2", "lat_offset": -0.005, "lng_offset": -0.015,
        "title": "City Heart Specialists",
        "specialty": "Cardiologist",
        "distance": "2.5 km",
        "website": "https://example.com/cityheart",
        "phone": "(03) 9876 5432",
        "description": "Specialized cardiac care and diagnostics. Referral often required.",
    },
    {
        "id": "doc3", "lat_offset": 0.002, "lng_offset": -0.008,
        "title": "South Wellness Practice",
        "specialty": "General Practitioner",
        "distance": "0.8 km",
        "website": "https://example.com/southwellness",
        "phone": "(03) 9555 0000",
        "description": "Family medicine and preventative care. Weekend appointments available.",
    },
    {
        "id": "doc4", "lat_offset": 0.015, "lng_offset": -0.005,
        "title": "Advanced Dermatology Clinic",
        "specialty": "Dermatologist",
        "distance": "3.1 km",
        "website": "https://example.com/advancedderm",
        "phone": "(03) 9222 3333",
        "description": "Comprehensive skin health services and cosmetic dermatology.",
    },
    {
        "id": "doc5", "lat_offset": -0.01, "lng_offset": 0.005,
        "title": "Eastside Physiotherapy & Sports Injury",
        "specialty": "Physiotherapist",
        "distance": "1.8 km",
        "website": "https://example.com/eastsidephysio",
        "phone": "(03) 9444 7777",
        "description": "Musculoskeletal and sports injury rehabilitation.",
    },
]

HOSPITAL_LISTINGS = [
    {
        "id": "hosp1", "lat_offset": 0.02, "lng_offset": -0.01,
        "title": "City General Hospital",
        "distance": "3.5 km",
        "website": "https://example.com/citygeneral",
        "phone": "(03) 9000 1000",
        "description": "Major public hospital with 24/7 emergency department.",
    },
    {
        "id": "hosp2", "lat_offset": -0.015, "lng_offset": 0.015,
        "title": "Community Medical Center",
        "distance": "4.2 km",
        "website": "https://example.com/communitymedical",
        "phone": "(03) 9000 2000",
        "description": "Private hospital offering a range of surgical and medical services.",
    },
    {
        "id": "hosp3", "lat_offset": -0.005, "lng_offset": -0.02,
        "title": "St. Luke's Emergency Care",
        "distance": "2.1 km",
        "website": "https://example.com/stlukes",
        "phone": "(03) 9000 3000",
        "description": "Specialized emergency and trauma center.",
    },
]

class FacilityService(BaseService):

    def __init__(self):
        super().__init__()
        self.default_location = UserLocation(
            lat=self.app_settings.DEFAULT_LOCATION_LAT,
            lng=self.app_settings.DEFAULT_LOCATION_LNG,
        )

    def locate(self, provider: LocationProvider) -> LocationResult:
        return locate_user(provider, default_location=self.default_location)

    @staticmethod
    def _build_markers(center: UserLocation, listings: List[dict], marker_type: MarkerType) -> List[MapMarker]:
        markers = []
        for listing in listings:
            details = {k: v for k, v in listing.items() if k not in ("lat_offset", "lng_offset")}
            markers.append(MapMarker(
                position=UserLocation(
                    lat=center.lat + listing["lat_offset"],
                    lng=center.lng + listing["lng_offset"],
                ),
                type=marker_type,
                **details,
            ))
        return markers

    @staticmethod
    def is_recommended(marker: MapMarker, suggested_specialty: Optional[str]) -> bool:
        if not suggested_specialty or not suggested_specialty.strip() or not marker.specialty:
            return False
        return suggested_specialty.lower().strip() in marker.specialty.lower()

    def nearby_doctors(self, center: UserLocation, suggested_specialty: Optional[str] = None) -> List[MapMarker]:
        markers = self._build_markers(center, DOCTOR_LISTINGS, MarkerType.DOCTOR)
        for marker in markers:
            marker.is_recommended = self.is_recommended(marker, suggested_specialty)

        logger.info(f"Built {len(markers)} doctor markers around ({center.lat}, {center.lng}), "
                    f"specialty filter: {suggested_specialty!r}")
        return markers

    def nearby_hospitals(self, center: UserLocation) -> List[MapMarker]:
        return self._build_markers(center, HOSPITAL_LISTINGS, MarkerType.HOSPITAL)
