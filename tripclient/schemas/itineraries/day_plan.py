from datetime import date as dt
from datetime import time as dt_time
from typing import List, Optional

from tripclient.schemas.base import CamelModel
from tripclient.schemas.activities.activity import Activity


class ScheduledActivity(Activity):
    start_time: Optional[dt_time] = None
    end_time: Optional[dt_time] = None
    estimated_duration: Optional[int] = None  # minutes


class DayPlan(CamelModel):
    id: str
    date: dt
    activities: List[ScheduledActivity] = []
    notes: Optional[str] = None

    def activity_ids(self) -> List[str]:
        return [activity.id for activity in self.activities]


class ScheduledActivityCreate(CamelModel):
    activity_id: Optional[str] = None
    activity: Optional[Activity] = None
    start_time: dt_time
    end_time: dt_time
    estimated_duration: Optional[int] = None


class ScheduledActivityUpdate(CamelModel):
    start_time: Optional[dt_time] = None
    end_time: Optional[dt_time] = None
    estimated_duration: Optional[int] = None
    notes: Optional[str] = None


class ReorderActivitiesRequest(CamelModel):
    activity_ids: List[str]
