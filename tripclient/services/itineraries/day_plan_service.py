from typing import List, Optional

from tripclient.core.http_client import ApiClient
from tripclient.schemas.itineraries.day_plan import (
    DayPlan,
    ReorderActivitiesRequest,
    ScheduledActivityCreate,
    ScheduledActivityUpdate,
)
from tripclient.utils.paths import segment


def _activities_path(itinerary_id: str, day_plan_id: str) -> str:
    return f"/itineraries/{segment(itinerary_id)}/days/{segment(day_plan_id)}"


class DayPlanService:
    """Mutations of the scheduled activities inside one day plan."""

    def __init__(self, api: ApiClient):
        self.api = api

    async def add_activity(
        self,
        itinerary_id: str,
        day_plan_id: str,
        activity: ScheduledActivityCreate,
        token: Optional[str] = None,
    ) -> DayPlan:
        data = await self.api.request(
            f"{_activities_path(itinerary_id, day_plan_id)}/activities",
            "POST",
            body=activity.model_dump_json(by_alias=True, exclude_none=True),
            token=token,
        )
        return DayPlan.from_payload(data)

    async def update_activity(
        self,
        itinerary_id: str,
        day_plan_id: str,
        activity_id: str,
        updates: ScheduledActivityUpdate,
        token: Optional[str] = None,
    ) -> DayPlan:
        data = await self.api.request(
            f"{_activities_path(itinerary_id, day_plan_id)}/activities/{segment(activity_id)}",
            "PUT",
            body=updates.model_dump_json(by_alias=True, exclude_unset=True),
            token=token,
        )
        return DayPlan.from_payload(data)

    async def remove_activity(
        self,
        itinerary_id: str,
        day_plan_id: str,
        activity_id: str,
        token: Optional[str] = None,
    ) -> Optional[DayPlan]:
        data = await self.api.request(
            f"{_activities_path(itinerary_id, day_plan_id)}/activities/{segment(activity_id)}",
            "DELETE",
            token=token,
        )
        if data is None:
            return None
        return DayPlan.from_payload(data)

    async def reorder_activities(
        self,
        itinerary_id: str,
        day_plan_id: str,
        activity_ids: List[str],
        token: Optional[str] = None,
    ) -> DayPlan:
        payload = ReorderActivitiesRequest(activity_ids=activity_ids)
        data = await self.api.request(
            f"{_activities_path(itinerary_id, day_plan_id)}/reorder",
            "PUT",
            body=payload.model_dump_json(by_alias=True),
            token=token,
        )
        return DayPlan.from_payload(data)
