from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from tripclient.dependencies.auth import get_optional_token
from tripclient.dependencies.services import get_activity_service, get_travel_service
from tripclient.schemas.activities.activity import Activity, TravelTime, TravelTimeRequest
from tripclient.services.activities.activity_service import ActivityService
from tripclient.services.travel.travel_service import TravelService


router = APIRouter(tags=["activities"])


@router.get("/activities/search", response_model=List[Activity])
async def search_activities(
    destination: str,
    category: Optional[str] = None,
    limit: int = Query(20, ge=1, le=100),
    service: ActivityService = Depends(get_activity_service),
):
    return await service.search_activities(destination, category, limit)


@router.get("/activities/query", response_model=List[Activity])
async def search_activities_by_query(
    q: str,
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=100),
    service: ActivityService = Depends(get_activity_service),
):
    return await service.search_activities_by_query(q, page, size)


@router.get("/activities/popular", response_model=List[Activity])
async def get_popular_activities(
    destination: str,
    limit: int = Query(20, ge=1, le=100),
    service: ActivityService = Depends(get_activity_service),
):
    return await service.get_popular_activities(destination, limit)


@router.get("/activities/nearby", response_model=List[Activity])
async def get_nearby_activities(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius_km: float = Query(5, gt=0, alias="radiusKm"),
    limit: int = Query(20, ge=1, le=100),
    service: ActivityService = Depends(get_activity_service),
):
    return await service.get_nearby_activities(latitude, longitude, radius_km, limit)


@router.post("/travel/time", response_model=TravelTime)
async def get_travel_time(
    request: TravelTimeRequest,
    token: Optional[str] = Depends(get_optional_token),
    service: TravelService = Depends(get_travel_service),
):
    return await service.get_travel_time(request.origin, request.destination, request.mode, token)
