import asyncio
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx

from tripclient.core.config import settings
from tripclient.core.exceptions import (
    ApiError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
    classify_response,
)
from tripclient.core.logger import logger

Body = Union[str, bytes, None]
SleepFunc = Callable[[float], Awaitable[Any]]


def backoff_delay_ms(retry_number: int) -> int:
    """Delay in milliseconds before the given retry (1 for the first retry)."""
    delay = settings.RETRY_BASE_DELAY_MS * (2 ** (retry_number - 1))
    return min(delay, settings.RETRY_MAX_DELAY_MS)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS
        self._sleep = sleep
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def server_root(self) -> str:
        """Base URL without the trailing /api prefix, where actuator endpoints live."""
        if self.base_url.endswith("/api"):
            return self.base_url[: -len("/api")]
        return self.base_url

    def build_headers(
        self, token: Optional[str] = None, headers: Optional[Mapping[str, str]] = None
    ) -> httpx.Headers:
        merged = httpx.Headers({"Content-Type": "application/json"})
        if token:
            merged["Authorization"] = f"Bearer {token}"
        # caller supplied headers win
        for key, value in (headers or {}).items():
            merged[key] = value
        return merged

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        body: Body = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        token: Optional[str] = None,
        retries: Optional[int] = None,
        absolute: bool = False,
    ) -> Any:
        url = endpoint if absolute else f"{self.base_url}{endpoint}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        merged_headers = self.build_headers(token, headers)
        attempts = max(1, retries if retries is not None else settings.MAX_RETRIES)

        last_error: Optional[ApiError] = None
        for attempt in range(1, attempts + 1):
            if attempt > 1:
                delay_ms = backoff_delay_ms(attempt - 1)
                logger.warning(
                    f"🔁 Retrying {method} {url} in {delay_ms}ms "
                    f"(attempt {attempt}/{attempts}) after: {last_error}"
                )
                await self._sleep(delay_ms / 1000)
            try:
                return await self._send_once(method, url, merged_headers, body, params)
            except ApiError as e:
                if not e.retryable:
                    logger.error(f"❌ {method} {url} failed: {e}")
                    raise
                last_error = e

        logger.error(f"🔥 {method} {url} failed after {attempts} attempt(s): {last_error}")
        raise last_error

    async def _send_once(
        self,
        method: str,
        url: str,
        headers: httpx.Headers,
        body: Body,
        params: Optional[Dict[str, Any]],
    ) -> Any:
        logger.debug(f"Making API request: {method} {url} params={params}")
        try:
            # hard cap on the whole attempt, httpx timeouts are per phase
            response = await asyncio.wait_for(
                self._client.request(method, url, headers=headers, content=body, params=params),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise RequestTimeoutError(f"request timed out after {self.timeout}s") from None
        except httpx.TransportError as e:
            raise NetworkError(f"network failure: {e}") from e

        logger.debug(f"API response: {response.status_code} {response.reason_phrase}")

        if not 200 <= response.status_code < 300:
            raise classify_response(response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"malformed JSON in response: {e}", status_code=response.status_code) from e
