"""Table location and row extraction (BeautifulSoup).

Pages carry many layout tables; these helpers pick the data table(s) and
return the body rows as lists of direct ``td`` cells. Documents go through
html5lib so omitted ``</td>`` / ``</tr>`` end tags close cells the way a
browser does (html.parser nests them instead). Header rows that html5lib
places in the synthesized ``tbody`` are filtered later by the decoder.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from bs4 import BeautifulSoup, Tag

from utils import html_utils

Row = List[Tag]


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html5lib")


def _owns(table: Tag, node: Tag) -> bool:
    # Nested tables keep their rows to themselves
    return node.find_parent("table") is table


def body_rows(table: Tag) -> List[Row]:
    tbodies = [tb for tb in table.find_all("tbody") if _owns(table, tb)]
    rows: List[Row] = []
    for tr in table.find_all("tr"):
        if not _owns(table, tr):
            continue
        section = tr.parent.name if tr.parent is not None else None
        if tbodies and section != "tbody":
            continue
        if section == "thead":
            continue
        rows.append(tr.find_all("td", recursive=False))
    return rows


def header_text(table: Tag) -> str:
    """Lowercased text of the table's first row (thead row when present)."""
    for tr in table.find_all("tr"):
        if _owns(table, tr):
            return html_utils.cell_text(tr).lower()
    return ""


def find_tables_with_min_cells(soup: BeautifulSoup, min_cells: int) -> List[Tag]:
    """Tables (document order) where at least one body row has >= min_cells cells."""
    return [
        table
        for table in soup.find_all("table")
        if any(len(row) >= min_cells for row in body_rows(table))
    ]


def find_table_by_headers(soup: BeautifulSoup, keywords: Iterable[str]) -> Tag | None:
    wanted = [k.lower() for k in keywords]
    for table in soup.find_all("table"):
        text = header_text(table)
        if all(k in text for k in wanted):
            return table
    return None


def find_table_by_selector(soup: BeautifulSoup, selector: str) -> Tag | None:
    return soup.select_one(selector)


def rows_per_table(tables: Sequence[Tag], count: int) -> List[List[Row]]:
    """Body rows of the first `count` tables, padding with empty lists when short."""
    out: List[List[Row]] = [body_rows(t) for t in tables[:count]]
    out.extend([] for _ in range(count - len(out)))
    return out
