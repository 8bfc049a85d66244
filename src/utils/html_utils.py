"""HTML cell helpers shared by the table parsers."""

from __future__ import annotations

import math
import re
from typing import Iterable

from bs4 import Tag

WS_RE = re.compile(r"\s+")
INT_PREFIX_RE = re.compile(r"[+-]?\d+")
FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


def clean_cell(text: str) -> str:
    # get_text turns &nbsp; into \xa0, which \s already covers
    return WS_RE.sub(" ", text).strip()


def cell_text(cell: Tag | None) -> str:
    return clean_cell(cell.get_text(" ")) if cell is not None else ""


def parse_int(text: str) -> int:
    """Leading base-10 integer of the trimmed text, 0 when there is none."""
    m = INT_PREFIX_RE.match(text.strip())
    return int(m.group(0)) if m else 0


def parse_float(text: str) -> float:
    """Leading decimal of the trimmed text (".750" -> 0.75), 0 when there is none.

    Exponents are not read; a value that overflows to inf yields 0.
    """
    m = FLOAT_PREFIX_RE.match(text.strip())
    if not m:
        return 0.0
    value = float(m.group(0))
    return value if math.isfinite(value) else 0.0


def first_text(cell: Tag, selectors: Iterable[str]) -> str:
    """Text of the first selector that yields non-empty text inside cell, else the cell text."""
    for selector in selectors:
        for node in cell.select(selector):
            text = cell_text(node)
            if text:
                return text
    return cell_text(cell)


def optional_text(cell: Tag, selector: str) -> str | None:
    node = cell.select_one(selector)
    if node is None:
        return None
    return cell_text(node) or None
