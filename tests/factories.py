import json
from typing import Dict, List

import httpx


BASE_URL = "http://backend.test/api"


class SleepRecorder:
    """Stands in for asyncio.sleep and remembers every requested delay."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def scheduled_activity(activity_id: str, start: str = "09:00:00", end: str = "10:00:00") -> dict:
    return {
        "id": activity_id,
        "name": f"Activity {activity_id}",
        "category": "sights",
        "location": {"latitude": 48.8584, "longitude": 2.2945, "address": "Champ de Mars, Paris"},
        "rating": 4.5,
        "startTime": start,
        "endTime": end,
        "estimatedDuration": 60,
    }


def make_itinerary(
    itinerary_id: str = "it-1",
    destination: str = "Paris",
    dates: tuple = ("2024-06-01", "2024-06-02", "2024-06-03"),
) -> dict:
    return {
        "id": itinerary_id,
        "title": f"Trip to {destination}",
        "destination": destination,
        "startDate": dates[0],
        "endDate": dates[-1],
        "dayPlans": [
            {
                "id": f"day-{index + 1}",
                "date": day,
                "activities": [
                    scheduled_activity("a", "09:00:00", "10:30:00"),
                    scheduled_activity("b", "11:00:00", "12:00:00"),
                    scheduled_activity("c", "14:30:00", "16:00:00"),
                ],
            }
            for index, day in enumerate(dates)
        ],
        "createdAt": "2024-05-01T10:00:00",
        "updatedAt": "2024-05-01T10:00:00",
    }


def forecast(day: str) -> dict:
    return {
        "date": day,
        "temperature": {"min": 58.0, "max": 72.5},
        "condition": "clear",
        "description": "Clear skies",
        "humidity": 50,
        "windSpeed": 4.2,
        "icon": "01d",
    }


class FakeBackend:
    """In-memory stand-in for the itinerary REST backend."""

    def __init__(self):
        self.itineraries: Dict[str, dict] = {"it-1": make_itinerary()}
        self.requests: List[httpx.Request] = []
        self.weather_status = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.removeprefix("/api/").split("/")

        if parts[0] == "weather":
            if self.weather_status != 200:
                return httpx.Response(self.weather_status, text="weather provider down")
            return httpx.Response(200, json=[forecast("2024-06-01"), forecast("2024-06-02")])

        if parts[0] != "itineraries" or len(parts) < 2:
            return httpx.Response(404)

        itinerary = self.itineraries.get(parts[1])
        if itinerary is None:
            return httpx.Response(404, text="Itinerary not found")

        if len(parts) == 2 and request.method == "GET":
            return httpx.Response(200, json=itinerary)

        if len(parts) == 5 and parts[2] == "days" and parts[4] == "reorder":
            day_plan = next((d for d in itinerary["dayPlans"] if d["id"] == parts[3]), None)
            if day_plan is None:
                return httpx.Response(404)
            order = json.loads(request.content)["activityIds"]
            by_id = {activity["id"]: activity for activity in day_plan["activities"]}
            if sorted(order) != sorted(by_id):
                return httpx.Response(400, text="activityIds must match the day plan")
            day_plan["activities"] = [by_id[activity_id] for activity_id in order]
            return httpx.Response(200, json=day_plan)

        return httpx.Response(405)


