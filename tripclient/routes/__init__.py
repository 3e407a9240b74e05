# tripclient/routes/__init__.py
from fastapi import APIRouter
from tripclient.routes import health_routes
from tripclient.routes.itineraries import itinerary_routes, day_plan_routes
from tripclient.routes.weather import weather_routes
from tripclient.routes.activities import activity_routes
from tripclient.routes.users import user_routes


api_router = APIRouter()

# Health routes
api_router.include_router(health_routes.router)

# Itinerary routes
api_router.include_router(itinerary_routes.router)
api_router.include_router(day_plan_routes.router)

# Weather routes
api_router.include_router(weather_routes.router)

# Activity and travel routes
api_router.include_router(activity_routes.router)

# User routes
api_router.include_router(user_routes.router)
