"""Column mapping and row decoding shared by all table kinds.

A `TableSpec` describes one data kind: how many cells a data row needs, which
column holds the primary label, and how each column index maps onto a record
field. `decode_rows` turns extracted rows into records, dropping rows that
are too short or whose label is empty / a repeated header, and numbering
the survivors 1..n in table order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence, Tuple, Type

from bs4 import BeautifulSoup, Tag

from domain.models import Record
from parsing.errors import ColumnMismatchError
from parsing import table_extractor
from parsing.table_extractor import Row
from utils import html_utils

__all__ = [
    "FieldSpec",
    "TableSpec",
    "decode_row",
    "decode_rows",
    "parse_table",
    "int_field",
    "float_field",
    "text_field",
]

INT = "int"
FLOAT = "float"
TEXT = "text"
OPTIONAL_TEXT = "optional_text"

# Upper bound for a column index; anything beyond is a typo in a mapping
MAX_COLUMNS = 64


@dataclass(frozen=True)
class FieldSpec:
    name: str
    index: int
    kind: str = INT
    selectors: Tuple[str, ...] = ()

    def decode(self, cells: Row) -> Any:
        cell = cells[self.index] if self.index < len(cells) else None
        if self.kind == INT:
            return html_utils.parse_int(html_utils.cell_text(cell))
        if self.kind == FLOAT:
            return html_utils.parse_float(html_utils.cell_text(cell))
        if cell is None:
            return None if self.kind == OPTIONAL_TEXT else ""
        if self.kind == OPTIONAL_TEXT:
            return html_utils.optional_text(cell, self.selectors[0])
        return html_utils.first_text(cell, self.selectors)


def int_field(name: str, index: int) -> FieldSpec:
    return FieldSpec(name, index, INT)


def float_field(name: str, index: int) -> FieldSpec:
    return FieldSpec(name, index, FLOAT)


def text_field(name: str, index: int, *selectors: str) -> FieldSpec:
    return FieldSpec(name, index, TEXT, tuple(selectors))


@dataclass(frozen=True)
class TableSpec:
    record_type: Type[Record]
    min_cells: int
    label_field: str
    header_label: str
    fields: Sequence[FieldSpec]
    locate: Callable[[BeautifulSoup], Tag | None] | None = None
    _by_name: Dict[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: Dict[str, FieldSpec] = {}
        for f in self.fields:
            if f.name in by_name:
                raise ColumnMismatchError(
                    f"Field {f.name!r} mapped twice", context={"record": self.record_type.__name__}
                )
            if not 0 <= f.index < MAX_COLUMNS:
                raise ColumnMismatchError(
                    f"Column index {f.index} out of range for field {f.name!r}",
                    context={"record": self.record_type.__name__, "index": f.index},
                )
            if f.kind == OPTIONAL_TEXT and len(f.selectors) != 1:
                raise ColumnMismatchError(
                    f"Optional field {f.name!r} needs exactly one selector",
                    context={"record": self.record_type.__name__},
                )
            by_name[f.name] = f
        if self.label_field not in by_name:
            raise ColumnMismatchError(
                f"Label field {self.label_field!r} has no column",
                context={"record": self.record_type.__name__},
            )
        object.__setattr__(self, "_by_name", by_name)

    @property
    def rank_field(self) -> str:
        return self.record_type.RANK_FIELD

    def label(self, cells: Row) -> str:
        return self._by_name[self.label_field].decode(cells)


def decode_row(cells: Row, spec: TableSpec, rank: int) -> Record:
    values = {f.name: f.decode(cells) for f in spec.fields}
    values[spec.rank_field] = rank
    return spec.record_type(**values)


def _is_data_row(cells: Row, spec: TableSpec) -> bool:
    if len(cells) < spec.min_cells:
        return False
    label = spec.label(cells)
    return bool(label) and label.lower() != spec.header_label.lower()


def decode_rows(rows: Sequence[Row], spec: TableSpec) -> List[Record]:
    records: List[Record] = []
    for cells in rows:
        if not _is_data_row(cells, spec):
            continue
        records.append(decode_row(cells, spec, rank=len(records) + 1))
    return records


def parse_table(html: str, spec: TableSpec) -> List[Record]:
    """Locate the mapped table in html and decode its body rows; no table -> no records."""
    if spec.locate is None:
        raise ColumnMismatchError(
            "TableSpec has no table locator", context={"record": spec.record_type.__name__}
        )
    table = spec.locate(table_extractor.parse_document(html))
    if table is None:
        return []
    return decode_rows(table_extractor.body_rows(table), spec)
