import asyncio

import httpx
import pytest

from config import settings
from core import async_http


def test_fetch_returns_body_and_sends_user_agent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers.get("user-agent")
        return httpx.Response(200, text="<html>ok</html>")

    async def go():
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            headers={"User-Agent": settings.DEFAULT_USER_AGENT},
        )
        async with client:
            return await async_http.fetch("https://example.test/page", client=client)

    assert asyncio.run(go()) == "<html>ok</html>"
    assert seen["ua"] == settings.DEFAULT_USER_AGENT


def test_non_2xx_raises_with_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await async_http.fetch("https://example.test/missing", client=client)

    with pytest.raises(async_http.AsyncHttpError) as exc:
        asyncio.run(go())
    assert "404 Not Found" in str(exc.value)


def test_transport_error_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await async_http.fetch("https://example.test/", client=client)

    with pytest.raises(async_http.AsyncHttpError):
        asyncio.run(go())


def test_url_builders():
    assert settings.build_standings_url().endswith("standings.cfm?leagueID=5750&clientID=2296")
    assert settings.build_player_stats_url("1-BRODEUR").endswith(
        "stats_hockey.cfm?leagueID=5750&clientID=2296&printPage=1&divID=129531"
    )
    assert settings.build_goalie_stats_url("3-STEVENS SOUTH").endswith(
        "stats_hockey.cfm?clientid=2296&leagueID=5750&divID=130945&statType=goalie&printPage=0"
    )
