from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from tripclient.dependencies.auth import get_optional_token, get_token
from tripclient.dependencies.services import get_itinerary_service, get_itinerary_view_service
from tripclient.schemas.itineraries.itinerary import (
    GenerateItineraryRequest,
    Itinerary,
    ItineraryUpdate,
    ItineraryView,
)
from tripclient.services.itineraries.itinerary_service import ItineraryService
from tripclient.services.itineraries.itinerary_view import ItineraryViewService


router = APIRouter(prefix="/itineraries", tags=["itineraries"])


@router.post("/generate", response_model=Itinerary, status_code=status.HTTP_201_CREATED)
async def generate_itinerary(
    request: GenerateItineraryRequest,
    user_id: str = Query(..., alias="userId"),
    token: str = Depends(get_token),
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.generate_itinerary(user_id, request, token)


@router.get("/my", response_model=List[Itinerary])
async def get_my_itineraries(
    token: str = Depends(get_token),
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.get_my_itineraries(token)


@router.get("/user/{user_id}", response_model=List[Itinerary])
async def get_user_itineraries(
    user_id: str,
    token: Optional[str] = Depends(get_optional_token),
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.get_user_itineraries(user_id, token)


@router.get("/destination/{destination}", response_model=List[Itinerary])
async def get_itineraries_by_destination(
    destination: str,
    limit: int = Query(20, ge=1, le=100),
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.get_itineraries_by_destination(destination, limit)


@router.get("/search", response_model=List[Itinerary])
async def search_itineraries(
    destination: str,
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.search_itineraries(destination)


@router.get("/{itinerary_id}", response_model=ItineraryView)
async def view_itinerary(
    itinerary_id: str,
    token: Optional[str] = Depends(get_optional_token),
    service: ItineraryViewService = Depends(get_itinerary_view_service),
):
    return await service.load(itinerary_id, token)


@router.put("/{itinerary_id}", response_model=Itinerary)
async def update_itinerary(
    itinerary_id: str,
    updates: ItineraryUpdate,
    token: str = Depends(get_token),
    service: ItineraryService = Depends(get_itinerary_service),
):
    return await service.update_itinerary(itinerary_id, updates, token)


@router.delete("/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_itinerary(
    itinerary_id: str,
    token: str = Depends(get_token),
    service: ItineraryService = Depends(get_itinerary_service),
):
    await service.delete_itinerary(itinerary_id, token)
