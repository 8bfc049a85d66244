"""Parsing of a division's player stats page.

Columns: Rank, Player, #, Pos, Team, GP, G, A, PTS, P/G, PPG, PPA, SHG, SHA, GWG, PIM.
The source rank column is ignored; rank is recomputed from row order.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from domain.models import PlayerStats, Record
from parsing import table_extractor
from parsing.field_decoder import TableSpec, float_field, int_field, parse_table, text_field

HEADER_KEYWORDS = ("player", "gp", "pts")


def locate_player_table(soup: BeautifulSoup) -> Tag | None:
    return table_extractor.find_table_by_headers(soup, HEADER_KEYWORDS)


PLAYER_STATS_SPEC = TableSpec(
    record_type=PlayerStats,
    min_cells=16,
    label_field="name",
    header_label="player",
    locate=locate_player_table,
    fields=[
        text_field("name", 1, "a"),
        text_field("jersey_number", 2),
        text_field("position", 3),
        text_field("team", 4),
        int_field("gp", 5),
        int_field("goals", 6),
        int_field("assists", 7),
        int_field("points", 8),
        float_field("points_per_game", 9),
        int_field("ppg", 10),
        int_field("ppa", 11),
        int_field("shg", 12),
        int_field("sha", 13),
        int_field("gwg", 14),
        int_field("pim", 15),
    ],
)


def parse_player_stats(html: str) -> List[Record]:
    return parse_table(html, PLAYER_STATS_SPEC)
