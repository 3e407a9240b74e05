from fastapi import APIRouter, Depends

from tripclient.dependencies.services import get_health_service
from tripclient.services.health_service import HealthService


router = APIRouter(prefix="/health", tags=["health"])


@router.get("/backend")
async def backend_health(service: HealthService = Depends(get_health_service)):
    return await service.health_check()


@router.get("/actuator")
async def backend_actuator_health(service: HealthService = Depends(get_health_service)):
    return await service.actuator_health()
