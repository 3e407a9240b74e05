from typing import Optional

from tripclient.core.exceptions import ApiError
from tripclient.core.logger import logger
from tripclient.schemas.itineraries.itinerary import ItineraryView
from tripclient.services.itineraries.itinerary_service import ItineraryService
from tripclient.services.weather.weather_service import WeatherService


class ItineraryViewService:
    """Everything the itinerary page shows: the itinerary and its weather."""

    def __init__(self, itineraries: ItineraryService, weather: WeatherService):
        self.itineraries = itineraries
        self.weather = weather

    async def load(self, itinerary_id: str, token: Optional[str] = None) -> ItineraryView:
        itinerary = await self.itineraries.get_itinerary(itinerary_id, token)

        try:
            forecasts = await self.weather.get_forecast(
                itinerary.destination, itinerary.start_date, itinerary.end_date
            )
        except ApiError as e:
            # weather is optional on this page
            logger.warning(f"Weather unavailable for {itinerary.destination}: {e}")
            return ItineraryView(itinerary=itinerary, weather=[], weather_error=str(e))

        return ItineraryView(itinerary=itinerary, weather=forecasts)
