from fastapi import Depends

from tripclient.core.client_lifecycle import get_api_client, get_identity_cache
from tripclient.core.http_client import ApiClient
from tripclient.core.identity_cache import IdentityCache
from tripclient.services.activities.activity_service import ActivityService
from tripclient.services.auth.user_service import UserService
from tripclient.services.health_service import HealthService
from tripclient.services.itineraries.day_plan_service import DayPlanService
from tripclient.services.itineraries.itinerary_service import ItineraryService
from tripclient.services.itineraries.itinerary_view import ItineraryViewService
from tripclient.services.travel.travel_service import TravelService
from tripclient.services.weather.weather_service import WeatherService


async def get_itinerary_service(api: ApiClient = Depends(get_api_client)) -> ItineraryService:
    return ItineraryService(api)


async def get_day_plan_service(api: ApiClient = Depends(get_api_client)) -> DayPlanService:
    return DayPlanService(api)


async def get_weather_service(api: ApiClient = Depends(get_api_client)) -> WeatherService:
    return WeatherService(api)


async def get_activity_service(api: ApiClient = Depends(get_api_client)) -> ActivityService:
    return ActivityService(api)


async def get_health_service(api: ApiClient = Depends(get_api_client)) -> HealthService:
    return HealthService(api)


async def get_user_service(
    api: ApiClient = Depends(get_api_client),
    cache: IdentityCache = Depends(get_identity_cache),
) -> UserService:
    return UserService(api, cache)


async def get_itinerary_view_service(
    itineraries: ItineraryService = Depends(get_itinerary_service),
    weather: WeatherService = Depends(get_weather_service),
) -> ItineraryViewService:
    return ItineraryViewService(itineraries, weather)


async def get_travel_service(api: ApiClient = Depends(get_api_client)) -> TravelService:
    return TravelService(api)
