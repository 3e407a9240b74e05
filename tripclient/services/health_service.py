from typing import Any, Dict

from tripclient.core.http_client import ApiClient


class HealthService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def health_check(self) -> Dict[str, Any]:
        return await self.api.request("/health")

    async def actuator_health(self) -> Dict[str, Any]:
        return await self.api.request(f"{self.api.server_root}/actuator/health", absolute=True)
