from typing import List, Optional

from tripclient.core.config import settings
from tripclient.core.http_client import ApiClient
from tripclient.schemas.activities.activity import Activity


class ActivityService:
    """Activity catalogue lookups used by the activity search dialog."""

    def __init__(self, api: ApiClient):
        self.api = api

    async def _list(self, endpoint: str, params: dict) -> List[Activity]:
        data = await self.api.request(endpoint, params=params)
        # paged endpoints wrap results in "content"
        if isinstance(data, dict):
            data = data.get("content", [])
        return [Activity.from_payload(item) for item in data or []]

    async def search_activities(
        self,
        destination: str,
        category: Optional[str] = None,
        limit: int = settings.DEFAULT_PAGE_SIZE,
    ) -> List[Activity]:
        return await self._list(
            "/activities/search",
            {"destination": destination, "category": category, "limit": limit},
        )

    async def search_activities_by_query(
        self, query: str, page: int = 0, size: int = settings.DEFAULT_PAGE_SIZE
    ) -> List[Activity]:
        return await self._list("/activities/query", {"q": query, "page": page, "size": size})

    async def get_popular_activities(
        self, destination: str, limit: int = settings.DEFAULT_PAGE_SIZE
    ) -> List[Activity]:
        return await self._list("/activities/popular", {"destination": destination, "limit": limit})

    async def get_nearby_activities(
        self,
        latitude: float,
        longitude: float,
        radius_km: float = 5,
        limit: int = settings.DEFAULT_PAGE_SIZE,
    ) -> List[Activity]:
        return await self._list(
            "/activities/nearby",
            {"latitude": latitude, "longitude": longitude, "radiusKm": radius_km, "limit": limit},
        )
