import pytest

from tripclient.core.client_lifecycle import close_api_client, get_api_client, init_api_client


@pytest.mark.asyncio
async def test_dependency_returns_the_shared_client():
    try:
        shared = init_api_client()

        assert await get_api_client() is shared
        assert await get_api_client() is shared
    finally:
        await close_api_client()


@pytest.mark.asyncio
async def test_client_is_recreated_after_shutdown():
    first = await get_api_client()
    await close_api_client()

    second = await get_api_client()
    await close_api_client()

    assert second is not first
