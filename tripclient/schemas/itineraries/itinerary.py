from pydantic import model_validator
from datetime import date, datetime
from typing import List, Optional

from tripclient.schemas.base import CamelModel
from tripclient.schemas.itineraries.day_plan import DayPlan
from tripclient.schemas.user.user import User
from tripclient.schemas.weather.weather import WeatherForecast
from tripclient.utils.formatting import date_range


class ItinerarySettings(CamelModel):
    allow_collaboration: bool = True
    publicly_visible: bool = False


class GenerateItineraryRequest(CamelModel):
    destination: str
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_date_order(self):
        if self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self

    @property
    def day_count(self) -> int:
        """Number of day plans the backend is expected to return."""
        return (self.end_date - self.start_date).days + 1


class ItineraryUpdate(CamelModel):
    title: str


class Itinerary(CamelModel):
    id: str
    title: str = ""
    destination: str
    start_date: date
    end_date: date
    owner: Optional[User] = None
    day_plans: List[DayPlan] = []
    settings: Optional[ItinerarySettings] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def trip_dates(self) -> List[date]:
        return date_range(self.start_date, self.end_date)

    def find_day_plan(self, day_plan_id: str) -> Optional[DayPlan]:
        for day_plan in self.day_plans:
            if day_plan.id == day_plan_id:
                return day_plan
        return None


class ItineraryView(CamelModel):
    itinerary: Itinerary
    weather: List[WeatherForecast] = []
    weather_error: Optional[str] = None
