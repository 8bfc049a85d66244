"""Parsing of the league standings page into per-division team standings.

The page renders one standings table per division with no reliable label,
so tables are matched to divisions purely by document order: the i-th table
that has a row with 8+ cells belongs to the i-th configured division.
`tracking.division_order` cross-checks that assumption between runs.

Team cell markup:
    <a><span class="d-sm-inline">Full Name</span><span class="d-sm-none">ABBR</span></a>
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from config import settings
from domain.models import Record, TeamStanding
from parsing import table_extractor
from parsing.table_extractor import Row
from parsing.field_decoder import (
    OPTIONAL_TEXT,
    FieldSpec,
    TableSpec,
    decode_rows,
    float_field,
    int_field,
    text_field,
)

log = logging.getLogger(__name__)

MIN_CELLS = 8

STANDINGS_SPEC = TableSpec(
    record_type=TeamStanding,
    min_cells=MIN_CELLS,
    label_field="team",
    header_label="team",
    fields=[
        text_field("team", 0, "a span.d-sm-inline", "a"),
        FieldSpec("abbr", 0, OPTIONAL_TEXT, ("a span.d-sm-none",)),
        int_field("gp", 1),
        int_field("w", 2),
        int_field("l", 3),
        int_field("t", 4),
        int_field("otl", 5),
        int_field("pts", 6),
        float_field("wpct", 7),
    ],
)


def split_tables(
    html: str, division_names: Sequence[str] = settings.DIVISION_NAMES
) -> Dict[str, List[Row]]:
    """Body rows of each qualifying standings table, keyed by division in document order."""
    soup = table_extractor.parse_document(html)
    tables = table_extractor.find_tables_with_min_cells(soup, MIN_CELLS)
    log.info("Found %d standings tables", len(tables))
    if len(tables) != len(division_names):
        log.warning(
            "Expected %d standings tables, found %d; divisions are matched by table order",
            len(division_names),
            len(tables),
        )
    per_table = table_extractor.rows_per_table(tables, len(division_names))
    return dict(zip(division_names, per_table))


def decode_standings(rows: Sequence[Row]) -> List[Record]:
    return decode_rows(rows, STANDINGS_SPEC)


def parse_standings(
    html: str, division_names: Sequence[str] = settings.DIVISION_NAMES
) -> Dict[str, List[Record]]:
    return {
        name: decode_standings(rows) for name, rows in split_tables(html, division_names).items()
    }
