from fastapi import APIRouter, Depends, Response, status

from tripclient.dependencies.auth import get_token
from tripclient.dependencies.services import get_day_plan_service
from tripclient.schemas.itineraries.day_plan import (
    DayPlan,
    ReorderActivitiesRequest,
    ScheduledActivityCreate,
    ScheduledActivityUpdate,
)
from tripclient.services.itineraries.day_plan_service import DayPlanService


router = APIRouter(prefix="/itineraries/{itinerary_id}/days/{day_plan_id}", tags=["day plans"])


@router.post("/activities", response_model=DayPlan, status_code=status.HTTP_201_CREATED)
async def add_activity(
    itinerary_id: str,
    day_plan_id: str,
    activity: ScheduledActivityCreate,
    token: str = Depends(get_token),
    service: DayPlanService = Depends(get_day_plan_service),
):
    return await service.add_activity(itinerary_id, day_plan_id, activity, token)


@router.put("/activities/{activity_id}", response_model=DayPlan)
async def update_activity(
    itinerary_id: str,
    day_plan_id: str,
    activity_id: str,
    updates: ScheduledActivityUpdate,
    token: str = Depends(get_token),
    service: DayPlanService = Depends(get_day_plan_service),
):
    return await service.update_activity(itinerary_id, day_plan_id, activity_id, updates, token)


@router.delete("/activities/{activity_id}")
async def remove_activity(
    itinerary_id: str,
    day_plan_id: str,
    activity_id: str,
    token: str = Depends(get_token),
    service: DayPlanService = Depends(get_day_plan_service),
):
    day_plan = await service.remove_activity(itinerary_id, day_plan_id, activity_id, token)
    if day_plan is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return day_plan.model_dump(mode="json", by_alias=True)


@router.put("/reorder", response_model=DayPlan)
async def reorder_activities(
    itinerary_id: str,
    day_plan_id: str,
    request: ReorderActivitiesRequest,
    token: str = Depends(get_token),
    service: DayPlanService = Depends(get_day_plan_service),
):
    return await service.reorder_activities(itinerary_id, day_plan_id, request.activity_ids, token)
