"""Standings page fetching (one page holds every division's table)."""

from __future__ import annotations

from typing import Dict, List, Sequence

import httpx

from config import settings
from core import async_http
from parsing import standings_parser
from parsing.table_extractor import Row


async def fetch_standings_tables(
    client: httpx.AsyncClient, division_names: Sequence[str] = settings.DIVISION_NAMES
) -> Dict[str, List[Row]]:
    html = await async_http.fetch(settings.build_standings_url(), client=client)
    return standings_parser.split_tables(html, division_names)
