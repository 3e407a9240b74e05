from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from tripclient.dependencies.services import get_weather_service
from tripclient.schemas.weather.weather import WeatherForecast
from tripclient.services.weather.weather_service import WeatherService


router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("/forecast", response_model=List[WeatherForecast])
async def get_forecast(
    destination: str,
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: WeatherService = Depends(get_weather_service),
):
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="startDate must not be after endDate")
    return await service.get_forecast(destination, start_date, end_date)
