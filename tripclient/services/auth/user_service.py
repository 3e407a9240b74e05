from typing import Optional

from tripclient.core.exceptions import ApiError, ClientError, NotFoundError, UserResolutionError
from tripclient.core.http_client import ApiClient
from tripclient.core.identity_cache import IdentityCache
from tripclient.core.logger import logger
from tripclient.schemas.user.user import ExternalUser, User, UserCreate, UserPreferences
from tripclient.utils.paths import segment


class UserService:
    def __init__(self, api: ApiClient, cache: IdentityCache):
        self.api = api
        self.cache = cache

    async def get_backend_user_id(self, external_user: ExternalUser, token: Optional[str] = None) -> str:
        """Map an external auth identity to the backend user id.

        Order: identity cache, lookup by clerk id, lookup by email, create.
        A freshly created user also gets default preferences.
        """
        if not external_user or not external_user.id:
            raise ValueError("No external user provided")

        cached = self.cache.get(external_user.id)
        if cached is not None:
            return cached

        user = await self._lookup(external_user, token)
        if user is None:
            user = await self._create_or_recover(external_user, token)

        self.cache.set(external_user.id, user.id)
        logger.info(f"Resolved external user {external_user.id} to backend user {user.id}")
        return user.id

    def sign_out(self, external_id: Optional[str] = None) -> None:
        if external_id is None:
            self.cache.clear()
        else:
            self.cache.delete(external_id)

    async def _lookup(self, external_user: ExternalUser, token: Optional[str]) -> Optional[User]:
        user = await self.find_user_by_clerk_id(external_user.id, token)
        if user is None and external_user.email:
            user = await self.find_user_by_email(external_user.email, token)
        return user

    async def _create_or_recover(self, external_user: ExternalUser, token: Optional[str]) -> User:
        try:
            return await self.create_user(external_user, token)
        except ClientError as e:
            # most likely created concurrently by another request
            logger.warning(f"Creating backend user for {external_user.id} failed ({e}), looking it up again")
            user = await self._lookup(external_user, token)
            if user is None:
                raise UserResolutionError(external_user.id) from e
            return user

    async def find_user_by_clerk_id(self, clerk_id: str, token: Optional[str] = None) -> Optional[User]:
        try:
            data = await self.api.request(f"/users/clerk/{segment(clerk_id)}", token=token)
        except NotFoundError:
            return None
        return User.from_payload(data) if data else None

    async def find_user_by_email(self, email: str, token: Optional[str] = None) -> Optional[User]:
        try:
            data = await self.api.request(f"/users/email/{segment(email)}", token=token)
        except NotFoundError:
            return None
        return User.from_payload(data) if data else None

    async def create_user(self, external_user: ExternalUser, token: Optional[str] = None) -> User:
        payload = UserCreate(
            email=external_user.email or "",
            name=external_user.display_name,
            clerk_user_id=external_user.id,
        )
        data = await self.api.request(
            "/users",
            "POST",
            body=payload.model_dump_json(by_alias=True),
            token=token,
        )
        user = User.from_payload(data)

        try:
            await self.update_user_preferences(user.id, UserPreferences(), token)
        except ApiError as e:
            logger.warning(f"Failed to create default preferences, but user {user.id} was created: {e}")

        return user

    async def get_user_preferences(self, user_id: str, token: Optional[str] = None) -> Optional[UserPreferences]:
        try:
            data = await self.api.request(f"/users/{segment(user_id)}/preferences", token=token)
            return UserPreferences.from_payload(data) if data else None
        except ApiError as e:
            logger.warning(f"Could not load preferences for user {user_id}: {e}")
            return None

    async def update_user_preferences(
        self, user_id: str, preferences: UserPreferences, token: Optional[str] = None
    ) -> UserPreferences:
        data = await self.api.request(
            f"/users/{segment(user_id)}/preferences",
            "PUT",
            body=preferences.model_dump_json(by_alias=True),
            token=token,
        )
        return UserPreferences.from_payload(data) if data else preferences
