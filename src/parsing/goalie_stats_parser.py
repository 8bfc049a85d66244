"""Parsing of a division's goalie stats page (``table.leaders``).

19 columns, the first one empty:
[empty], Goalie, Team, GP, W, L, T, OTL, SO, MP, GA, GAA, GSAA, SA, SV, SV%, G, A, PIM

The goalie cell renders a desktop and a mobile variant of the name link;
the team cell repeats the abbreviation in two spans.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from domain.models import GoalieStats, Record
from parsing import table_extractor
from parsing.field_decoder import TableSpec, float_field, int_field, parse_table, text_field

TABLE_SELECTOR = "table.leaders"


def locate_goalie_table(soup: BeautifulSoup) -> Tag | None:
    return table_extractor.find_table_by_selector(soup, TABLE_SELECTOR)


GOALIE_STATS_SPEC = TableSpec(
    record_type=GoalieStats,
    min_cells=16,
    label_field="name",
    header_label="goalie",
    locate=locate_goalie_table,
    fields=[
        text_field("name", 1, "span.d-sm-block a", "span.d-sm-none a"),
        text_field("team", 2, "span"),
        int_field("gp", 3),
        int_field("w", 4),
        int_field("l", 5),
        int_field("t", 6),
        int_field("otl", 7),
        int_field("so", 8),
        int_field("mp", 9),
        int_field("ga", 10),
        float_field("gaa", 11),
        float_field("gsaa", 12),
        int_field("sa", 13),
        int_field("sv", 14),
        float_field("sv_pct", 15),
        int_field("goals", 16),
        int_field("assists", 17),
        int_field("pim", 18),
    ],
)


def parse_goalie_stats(html: str) -> List[Record]:
    return parse_table(html, GOALIE_STATS_SPEC)
