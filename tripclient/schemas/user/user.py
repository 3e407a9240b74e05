from datetime import datetime
from enum import Enum
from typing import List, Optional


from tripclient.schemas.base import CamelModel


class BudgetLevel(str, Enum):
    BUDGET = "BUDGET"
    MID_RANGE = "MID_RANGE"
    LUXURY = "LUXURY"


class TravelStyle(str, Enum):
    RELAXED = "RELAXED"
    MODERATE = "MODERATE"
    PACKED = "PACKED"


class PreferredTransport(str, Enum):
    WALKING = "WALKING"
    PUBLIC = "PUBLIC"
    DRIVING = "DRIVING"
    CYCLING = "CYCLING"


class UserPreferences(CamelModel):
    interests: List[str] = []
    budget_level: BudgetLevel = BudgetLevel.MID_RANGE
    travel_style: TravelStyle = TravelStyle.MODERATE
    dietary_restrictions: List[str] = []
    preferred_transport: PreferredTransport = PreferredTransport.WALKING


class User(CamelModel):
    id: str
    clerk_id: Optional[str] = None
    email: str = ""
    name: str = ""
    profile_picture: Optional[str] = None
    preferences: Optional[UserPreferences] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserCreate(CamelModel):
    email: str
    name: str
    # backend expects clerkUserId here, not clerkId
    clerk_user_id: str


# Identity handed over by the external auth provider
class ExternalUser(CamelModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.first_name or "User"


class ResolvedUser(CamelModel):
    external_id: str
    backend_user_id: str
