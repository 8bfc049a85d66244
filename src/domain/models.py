"""Domain models for the standings / stats snapshots.

Records serialize with the JSON keys the dashboard reads (camelCase where the
snapshot format uses it); the attribute names stay snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Type, TypeVar

from parsing.errors import SnapshotFormatError

R = TypeVar("R", bound="Record")


def _json_key(name: str) -> Dict[str, str]:
    return {"json": name}


class SnapshotKind(str, Enum):
    STANDINGS = "standings"
    PLAYER_STATS = "player-stats"
    GOALIE_STATS = "goalie-stats"


@dataclass(frozen=True, slots=True)
class Record:
    """Base for one decoded table row."""

    # Field holding the 1-indexed order within the division
    RANK_FIELD: ClassVar[str] = "rank"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.metadata.get("json", f.name)] = value
        return out

    @classmethod
    def from_dict(cls: Type[R], raw: Mapping[str, Any]) -> R:
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key in raw:
                kwargs[f.name] = raw[key]
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise SnapshotFormatError(
                f"Invalid {cls.__name__} payload: {e}", context={"payload": dict(raw)}
            ) from e

    @property
    def order(self) -> int:
        return getattr(self, self.RANK_FIELD)


@dataclass(frozen=True, slots=True)
class TeamStanding(Record):
    RANK_FIELD: ClassVar[str] = "position"

    team: str
    abbr: str | None = None
    gp: int = 0
    w: int = 0
    l: int = 0  # noqa: E741
    t: int = 0
    otl: int = 0
    pts: int = 0
    wpct: float = 0.0
    position: int = 0


@dataclass(frozen=True, slots=True)
class PlayerStats(Record):
    rank: int
    name: str
    jersey_number: str = field(default="", metadata=_json_key("jerseyNumber"))
    position: str = ""
    team: str = ""
    gp: int = 0
    goals: int = 0
    assists: int = 0
    points: int = 0
    points_per_game: float = field(default=0.0, metadata=_json_key("pointsPerGame"))
    ppg: int = 0
    ppa: int = 0
    shg: int = 0
    sha: int = 0
    gwg: int = 0
    pim: int = 0


@dataclass(frozen=True, slots=True)
class GoalieStats(Record):
    rank: int
    name: str
    team: str = ""
    gp: int = 0
    w: int = 0
    l: int = 0  # noqa: E741
    t: int = 0
    otl: int = 0
    so: int = 0
    mp: int = 0
    ga: int = 0
    gaa: float = 0.0
    gsaa: float = 0.0
    sa: int = 0
    sv: int = 0
    sv_pct: float = field(default=0.0, metadata=_json_key("svPct"))
    goals: int = 0
    assists: int = 0
    pim: int = 0


RECORD_TYPES: Dict[SnapshotKind, Type[Record]] = {
    SnapshotKind.STANDINGS: TeamStanding,
    SnapshotKind.PLAYER_STATS: PlayerStats,
    SnapshotKind.GOALIE_STATS: GoalieStats,
}


@dataclass(slots=True)
class Snapshot:
    date: str
    divisions: Dict[str, List[Record]] = field(default_factory=dict)

    def total_records(self) -> int:
        return sum(len(v) for v in self.divisions.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "divisions": {
                name: [r.to_dict() for r in records] for name, records in self.divisions.items()
            },
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], kind: SnapshotKind) -> "Snapshot":
        if "date" not in raw or not isinstance(raw.get("divisions"), Mapping):
            raise SnapshotFormatError(
                "Snapshot requires 'date' and 'divisions'", context={"keys": sorted(raw)}
            )
        record_type = RECORD_TYPES[kind]
        divisions = {
            name: [record_type.from_dict(r) for r in rows]
            for name, rows in raw["divisions"].items()
        }
        return cls(date=str(raw["date"]), divisions=divisions)


def utc_now_iso() -> str:
    """ISO timestamp in UTC with millisecond precision and a 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


@dataclass(slots=True)
class SnapshotIndex:
    divisions: List[str]
    dates: List[str] = field(default_factory=list)
    last_updated: str = field(default_factory=utc_now_iso)

    @classmethod
    def empty(cls, divisions: List[str]) -> "SnapshotIndex":
        return cls(divisions=list(divisions), dates=[])

    def record_date(self, date: str) -> None:
        if date not in self.dates:
            self.dates.append(date)
            self.dates.sort(reverse=True)
        self.last_updated = utc_now_iso()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "divisions": list(self.divisions),
            "dates": list(self.dates),
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SnapshotIndex":
        missing = [k for k in ("divisions", "dates") if k not in raw]
        if missing:
            raise SnapshotFormatError("Index is missing keys", context={"missing": missing})
        return cls(
            divisions=list(raw["divisions"]),
            dates=list(raw["dates"]),
            last_updated=str(raw.get("lastUpdated") or utc_now_iso()),
        )
