from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import List, Optional
from services import FacilityService
from helpers.geolocation import ClientCoordinatesProvider, LocationResult
from models import ResponseSignal
from models.db_schemes import MapMarker

facilities_router = APIRouter(
    prefix="/api/v1/facilities",
    tags=["api_v1", "facilities"],
)

def facilities_payload(location_result: LocationResult, markers: List[MapMarker]) -> dict:
    return {
        "signal": ResponseSignal.FACILITIES_RETRIEVED.value,
        **location_result.model_dump(mode="json", by_alias=True, exclude_none=True),
        "markers": [m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in markers],
    }

@facilities_router.get("/doctors", summary="Nearby doctors", description="Mock doctor listings around the given coordinates. Without usable coordinates the default location is used and flagged. Doctors whose specialty matches `specialty` are marked as recommended.")
async def nearby_doctors(lat: Optional[float] = Query(default=None),
                         lng: Optional[float] = Query(default=None),
                         specialty: Optional[str] = Query(default=None)):

    facility_service = FacilityService()
    location_result = facility_service.locate(ClientCoordinatesProvider(lat=lat, lng=lng))
    markers = facility_service.nearby_doctors(center=location_result.location, suggested_specialty=specialty)

    return JSONResponse(content=facilities_payload(location_result, markers))

@facilities_router.get("/hospitals", summary="Nearby hospitals", description="Mock hospital listings around the given coordinates, with the same default-location fallback as /doctors.")
async def nearby_hospitals(lat: Optional[float] = Query(default=None),
                           lng: Optional[float] = Query(default=None)):

    facility_service = FacilityService()
    location_result = facility_service.locate(ClientCoordinatesProvider(lat=lat, lng=lng))
    markers = facility_service.nearby_hospitals(center=location_result.location)

    return JSONResponse(content=facilities_payload(location_result, markers))
