from enum import Enum
from typing import List, Optional

from tripclient.schemas.base import CamelModel


class ActivityCategory(str, Enum):
    sights = "sights"
    food = "food"
    outdoor = "outdoor"
    nightlife = "nightlife"
    shopping = "shopping"
    culture = "culture"
    adventure = "adventure"
    relaxation = "relaxation"


class Location(CamelModel):
    latitude: float
    longitude: float
    address: str = ""
    city: Optional[str] = None
    country: Optional[str] = None
    place_id: Optional[str] = None


class Activity(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    # open set, see ActivityCategory for the known values
    category: str
    location: Location
    rating: Optional[float] = None
    price_range: Optional[str] = None
    website_url: Optional[str] = None
    tags: Optional[List[str]] = None

    @property
    def known_category(self) -> Optional[ActivityCategory]:
        try:
            return ActivityCategory(self.category)
        except ValueError:
            return None


class TravelTimeRequest(CamelModel):
    origin: Location
    destination: Location
    mode: str = "WALKING"


class TravelTime(CamelModel):
    duration_minutes: Optional[float] = None
    distance_km: Optional[float] = None
    mode: Optional[str] = None
