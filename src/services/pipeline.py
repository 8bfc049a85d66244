"""High-level orchestration: one snapshot per data kind.

Each scrape walks the fixed division sequence once, awaiting every division
before starting the next. A failing division is logged and recorded as an
empty list; the other divisions still run and the snapshot is returned even
when every division came back empty (callers decide whether that is fatal).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Dict, List, Optional, Sequence

import httpx

from config import settings
from core import async_http
from domain.models import Record, Snapshot, SnapshotKind, today_iso
from parsing import standings_parser
from scraping import standings_scraper, stats_scraper

log = logging.getLogger(__name__)

DivisionFetcher = Callable[[str], Awaitable[List[Record]]]


@asynccontextmanager
async def _client_scope(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    owned = async_http.make_client()
    try:
        yield owned
    finally:
        await owned.aclose()


async def collect_divisions(
    fetch_division: DivisionFetcher,
    division_names: Sequence[str] = settings.DIVISION_NAMES,
    *,
    label: str = "records",
) -> Dict[str, List[Record]]:
    divisions: Dict[str, List[Record]] = {}
    for name in division_names:
        try:
            records = await fetch_division(name)
        except Exception:  # noqa: BLE001
            log.exception("Error scraping %s %s", name, label)
            records = []
        divisions[name] = records
        log.info("  %s: %d %s", name, len(records), label)
    return divisions


async def scrape_standings(
    client: Optional[httpx.AsyncClient] = None,
    *,
    date: str | None = None,
    division_names: Sequence[str] = settings.DIVISION_NAMES,
) -> Snapshot:
    """Fetch the standings page once and decode each division's table.

    A failure fetching the page itself propagates: there is only one page.
    """
    log.info("Fetching HNA standings page...")
    async with _client_scope(client) as c:
        tables = await standings_scraper.fetch_standings_tables(c, division_names)

    async def _decode(name: str) -> List[Record]:
        return standings_parser.decode_standings(tables.get(name, []))

    divisions = await collect_divisions(_decode, division_names, label="teams")
    return Snapshot(date=date or today_iso(), divisions=divisions)


async def scrape_player_stats(
    client: Optional[httpx.AsyncClient] = None,
    *,
    date: str | None = None,
    division_names: Sequence[str] = settings.DIVISION_NAMES,
) -> Snapshot:
    log.info("Fetching HNA player stats...")
    async with _client_scope(client) as c:

        async def _fetch(name: str) -> List[Record]:
            return await stats_scraper.fetch_player_stats(name, c)

        divisions = await collect_divisions(_fetch, division_names, label="players")
    return Snapshot(date=date or today_iso(), divisions=divisions)


async def scrape_goalie_stats(
    client: Optional[httpx.AsyncClient] = None,
    *,
    date: str | None = None,
    division_names: Sequence[str] = settings.DIVISION_NAMES,
) -> Snapshot:
    log.info("Fetching HNA goalie stats...")
    async with _client_scope(client) as c:

        async def _fetch(name: str) -> List[Record]:
            return await stats_scraper.fetch_goalie_stats(name, c)

        divisions = await collect_divisions(_fetch, division_names, label="goalies")
    return Snapshot(date=date or today_iso(), divisions=divisions)


SCRAPERS: Dict[SnapshotKind, Callable[..., Awaitable[Snapshot]]] = {
    SnapshotKind.STANDINGS: scrape_standings,
    SnapshotKind.PLAYER_STATS: scrape_player_stats,
    SnapshotKind.GOALIE_STATS: scrape_goalie_stats,
}
