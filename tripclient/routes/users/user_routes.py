from fastapi import APIRouter, Depends, HTTPException, status
from tripclient.schemas.base import CamelModel

from tripclient.dependencies.auth import get_token
from tripclient.dependencies.services import get_user_service
from tripclient.schemas.user.user import ExternalUser, ResolvedUser, UserPreferences
from tripclient.services.auth.user_service import UserService


router = APIRouter(prefix="/users", tags=["users"])


class SignOutRequest(CamelModel):
    external_id: str


@router.post("/resolve", response_model=ResolvedUser)
async def resolve_user(
    external_user: ExternalUser,
    token: str = Depends(get_token),
    service: UserService = Depends(get_user_service),
):
    backend_user_id = await service.get_backend_user_id(external_user, token)
    return ResolvedUser(external_id=external_user.id, backend_user_id=backend_user_id)


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    request: SignOutRequest,
    token: str = Depends(get_token),
    service: UserService = Depends(get_user_service),
):
    # only the given identity, other sessions share this cache
    service.sign_out(request.external_id)


@router.get("/{user_id}/preferences", response_model=UserPreferences)
async def get_preferences(
    user_id: str,
    token: str = Depends(get_token),
    service: UserService = Depends(get_user_service),
):
    preferences = await service.get_user_preferences(user_id, token)
    if preferences is None:
        raise HTTPException(status_code=404, detail="Preferences not available")
    return preferences


@router.put("/{user_id}/preferences", response_model=UserPreferences)
async def update_preferences(
    user_id: str,
    preferences: UserPreferences,
    token: str = Depends(get_token),
    service: UserService = Depends(get_user_service),
):
    return await service.update_user_preferences(user_id, preferences, token)
