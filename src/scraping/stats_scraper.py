"""Per-division stats page fetching + parsing (one page per division)."""

from __future__ import annotations

from typing import List

import httpx

from config import settings
from core import async_http
from domain.models import Record
from parsing import goalie_stats_parser, player_stats_parser


async def fetch_player_stats(division_name: str, client: httpx.AsyncClient) -> List[Record]:
    html = await async_http.fetch(settings.build_player_stats_url(division_name), client=client)
    return player_stats_parser.parse_player_stats(html)


async def fetch_goalie_stats(division_name: str, client: httpx.AsyncClient) -> List[Record]:
    html = await async_http.fetch(settings.build_goalie_stats_url(division_name), client=client)
    return goalie_stats_parser.parse_goalie_stats(html)
