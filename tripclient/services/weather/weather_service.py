from datetime import date
from typing import List

from tripclient.core.http_client import ApiClient
from tripclient.schemas.weather.weather import WeatherForecast


class WeatherService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def get_forecast(self, destination: str, start_date: date, end_date: date) -> List[WeatherForecast]:
        data = await self.api.request(
            "/weather/forecast",
            params={
                "destination": destination,
                "startDate": start_date.isoformat(),
                "endDate": end_date.isoformat(),
            },
        )
        return [WeatherForecast.from_payload(item) for item in data or []]
