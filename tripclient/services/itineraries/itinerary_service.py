from typing import List, Optional

from tripclient.core.http_client import ApiClient
from tripclient.core.logger import logger
from tripclient.schemas.itineraries.itinerary import (
    GenerateItineraryRequest,
    Itinerary,
    ItineraryUpdate,
)
from tripclient.utils.paths import segment


class ItineraryService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def generate_itinerary(
        self,
        user_id: str,
        request: GenerateItineraryRequest,
        token: Optional[str] = None,
    ) -> Itinerary:
        data = await self.api.request(
            "/itineraries/generate",
            "POST",
            params={
                "userId": user_id,
                "destination": request.destination,
                "startDate": request.start_date.isoformat(),
                "endDate": request.end_date.isoformat(),
            },
            token=token,
        )
        itinerary = Itinerary.from_payload(data)
        if len(itinerary.day_plans) != request.day_count:
            logger.warning(
                f"Generated itinerary {itinerary.id} has {len(itinerary.day_plans)} day plans, "
                f"expected {request.day_count}"
            )
        logger.info(f"✅ Itinerary {itinerary.id} generated for {request.destination}")
        return itinerary

    async def get_my_itineraries(self, token: Optional[str] = None) -> List[Itinerary]:
        data = await self.api.request("/itineraries/my", token=token)
        return [Itinerary.from_payload(item) for item in data or []]

    async def get_user_itineraries(self, user_id: str, token: Optional[str] = None) -> List[Itinerary]:
        data = await self.api.request(f"/itineraries/user/{segment(user_id)}", token=token)
        return [Itinerary.from_payload(item) for item in data or []]

    async def get_itinerary(self, itinerary_id: str, token: Optional[str] = None) -> Itinerary:
        data = await self.api.request(f"/itineraries/{segment(itinerary_id)}", token=token)
        return Itinerary.from_payload(data)

    async def get_itineraries_by_destination(self, destination: str, limit: int = 20) -> List[Itinerary]:
        data = await self.api.request(
            f"/itineraries/destination/{segment(destination)}",
            params={"limit": limit},
        )
        return [Itinerary.from_payload(item) for item in data or []]

    async def search_itineraries(self, destination: str) -> List[Itinerary]:
        data = await self.api.request("/itineraries/search", params={"destination": destination})
        return [Itinerary.from_payload(item) for item in data or []]

    async def update_itinerary(
        self, itinerary_id: str, updates: ItineraryUpdate, token: Optional[str] = None
    ) -> Itinerary:
        data = await self.api.request(
            f"/itineraries/{segment(itinerary_id)}",
            "PUT",
            body=updates.model_dump_json(by_alias=True),
            token=token,
        )
        return Itinerary.from_payload(data)

    async def delete_itinerary(self, itinerary_id: str, token: Optional[str] = None) -> None:
        await self.api.request(f"/itineraries/{segment(itinerary_id)}", "DELETE", token=token)
        logger.info(f"Itinerary {itinerary_id} deleted")
