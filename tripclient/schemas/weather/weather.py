from datetime import date as dt
from typing import Optional

from tripclient.schemas.base import CamelModel


class Temperature(CamelModel):
    min: float
    max: float


class WeatherForecast(CamelModel):
    date: dt
    temperature: Temperature
    condition: str = "clear"
    description: str = ""
    humidity: Optional[int] = None
    wind_speed: Optional[float] = None
    icon: Optional[str] = None
