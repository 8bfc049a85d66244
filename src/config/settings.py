"""Global configuration and constants for the scraping pipeline.

All HNA URLs and ids are centralized here so a new season only needs
LEAGUE_ID / CLIENT_ID / DIVISION_IDS updated.
"""

from __future__ import annotations

import os
from typing import Final, Mapping

HNA_STANDINGS_URL: Final = "https://www.hna.com/leagues/standings.cfm"
HNA_STATS_URL: Final = "https://www.hna.com/leagues/stats_hockey.cfm"

LEAGUE_ID: Final = "5750"
CLIENT_ID: Final = "2296"

# Order matters: standings tables are matched to divisions by document order
DIVISION_NAMES: Final = (
    "1-BRODEUR",
    "2-MANNO",
    "3-STEVENS NORTH",
    "3-STEVENS SOUTH",
)

DIVISION_IDS: Final[Mapping[str, str]] = {
    "1-BRODEUR": "129531",
    "2-MANNO": "129533",
    "3-STEVENS NORTH": "129532",
    "3-STEVENS SOUTH": "130945",
}

DEFAULT_USER_AGENT: Final = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)
DEFAULT_TIMEOUT: Final = 15  # seconds
DATA_DIR: Final = os.environ.get("HNA_TRACKER_DATA_DIR", "data")

# Leaderboard trends
DEFAULT_TOP_N: Final = 10
GOALIE_MIN_GP: Final = 3


def build_standings_url() -> str:
    return f"{HNA_STANDINGS_URL}?leagueID={LEAGUE_ID}&clientID={CLIENT_ID}"


def build_player_stats_url(division_name: str) -> str:
    div_id = DIVISION_IDS[division_name]
    return f"{HNA_STATS_URL}?leagueID={LEAGUE_ID}&clientID={CLIENT_ID}&printPage=1&divID={div_id}"


def build_goalie_stats_url(division_name: str) -> str:
    """{BASE}?clientid={CLIENT_ID}&leagueID={LEAGUE_ID}&divID={DIV_ID}&statType=goalie&printPage=0"""
    div_id = DIVISION_IDS[division_name]
    return (
        f"{HNA_STATS_URL}?clientid={CLIENT_ID}&leagueID={LEAGUE_ID}"
        f"&divID={div_id}&statType=goalie&printPage=0"
    )
