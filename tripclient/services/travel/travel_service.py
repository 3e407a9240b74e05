from typing import Optional

from tripclient.core.http_client import ApiClient
from tripclient.schemas.activities.activity import Location, TravelTime, TravelTimeRequest


class TravelService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def get_travel_time(
        self,
        origin: Location,
        destination: Location,
        mode: str = "WALKING",
        token: Optional[str] = None,
    ) -> TravelTime:
        payload = TravelTimeRequest(origin=origin, destination=destination, mode=mode)
        data = await self.api.request(
            "/travel/time",
            "POST",
            body=payload.model_dump_json(by_alias=True, exclude_none=True),
            token=token,
        )
        return TravelTime.from_payload(data)
