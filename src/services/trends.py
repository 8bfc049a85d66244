"""Time-series builders over stored snapshots.

Produces chart-ready data (no rendering): per-team standings positions over
time and per-player / per-goalie leaderboard ranks for a chosen stat.

Design Notes:
 - Inputs are snapshots sorted oldest first (as `SnapshotStore.load_all`
   returns them); each output series has one value per snapshot, `None`
   where the entity is absent (or outside the top N for leaderboards).
 - Leaderboards re-rank by the chosen stat per snapshot; the stored
   rank/position is table order and is not reused here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from config import settings
from domain.models import Record, Snapshot

__all__ = [
    "Series",
    "SeriesSet",
    "PLAYER_STATS",
    "GOALIE_STATS",
    "standings_position_series",
    "leaderboard_series",
    "goalie_leaderboard_series",
    "team_name_map",
    "label_teams",
]

# stat key -> record attribute
PLAYER_STATS: Mapping[str, str] = {
    "goals": "goals",
    "assists": "assists",
    "points": "points",
}

# stat key -> (record attribute, ascending); lower GAA is better
GOALIE_STATS: Mapping[str, tuple[str, bool]] = {
    "so": ("so", False),
    "gaa": ("gaa", True),
    "svPct": ("sv_pct", False),
}


@dataclass(frozen=True)
class Series:
    label: str
    values: List[Optional[int]]

    def to_mapping(self) -> Mapping[str, object]:
        return {"label": self.label, "values": list(self.values)}


@dataclass(frozen=True)
class SeriesSet:
    dates: List[str]
    series: List[Series]

    def to_mapping(self) -> Mapping[str, object]:
        return {"dates": list(self.dates), "series": [s.to_mapping() for s in self.series]}


def _last_rank(order: Mapping[str, int], label: str) -> float:
    return order.get(label, float("inf"))


def standings_position_series(snapshots: Sequence[Snapshot], division: str) -> SeriesSet:
    """One series per team seen in the division, ordered by latest position."""
    dates = [s.date for s in snapshots]
    per_date: List[Dict[str, int]] = []
    teams: List[str] = []
    for snapshot in snapshots:
        positions: Dict[str, int] = {}
        for record in snapshot.divisions.get(division, []):
            team = getattr(record, "team")
            positions[team] = record.order
            if team not in teams:
                teams.append(team)
        per_date.append(positions)
    latest = per_date[-1] if per_date else {}
    teams.sort(key=lambda t: _last_rank(latest, t))
    series = [Series(label=t, values=[p.get(t) for p in per_date]) for t in teams]
    return SeriesSet(dates=dates, series=series)


def _rank_by_stat(
    records: Sequence[Record], attr: str, *, ascending: bool, min_gp: int
) -> Dict[str, int]:
    qualified = [r for r in records if getattr(r, "gp", 0) >= min_gp]
    # Name first so equal stats fall back to alphabetical order (stable sort)
    qualified.sort(key=lambda r: getattr(r, "name"))
    qualified.sort(key=lambda r: getattr(r, attr), reverse=not ascending)
    return {getattr(r, "name"): i + 1 for i, r in enumerate(qualified)}


def leaderboard_series(
    snapshots: Sequence[Snapshot],
    division: str,
    attr: str,
    *,
    top_n: int = settings.DEFAULT_TOP_N,
    ascending: bool = False,
    min_gp: int = 0,
) -> SeriesSet:
    """Stat-rank series for everyone who reached the top N in any snapshot."""
    dates = [s.date for s in snapshots]
    ranked = [
        _rank_by_stat(s.divisions.get(division, []), attr, ascending=ascending, min_gp=min_gp)
        for s in snapshots
    ]
    names: List[str] = []
    for ranks in ranked:
        for name, rank in sorted(ranks.items(), key=lambda kv: kv[1]):
            if rank <= top_n and name not in names:
                names.append(name)
    latest = ranked[-1] if ranked else {}
    names.sort(key=lambda n: (_last_rank(latest, n), n))
    series = []
    for name in names:
        values = [r.get(name) if r.get(name, top_n + 1) <= top_n else None for r in ranked]
        series.append(Series(label=name, values=values))
    return SeriesSet(dates=dates, series=series)


def goalie_leaderboard_series(
    snapshots: Sequence[Snapshot],
    division: str,
    stat: str,
    *,
    top_n: int = settings.DEFAULT_TOP_N,
    min_gp: int = settings.GOALIE_MIN_GP,
) -> SeriesSet:
    attr, ascending = GOALIE_STATS[stat]
    return leaderboard_series(
        snapshots, division, attr, top_n=top_n, ascending=ascending, min_gp=min_gp
    )


def team_name_map(standings_snapshots: Sequence[Snapshot]) -> Dict[str, str]:
    """Abbreviation -> full team name from the newest snapshot that has abbreviations."""
    for snapshot in reversed(standings_snapshots):
        mapping: Dict[str, str] = {}
        for records in snapshot.divisions.values():
            for record in records:
                abbr = getattr(record, "abbr", None)
                if abbr and abbr not in mapping:
                    mapping[abbr] = getattr(record, "team")
        if mapping:
            return mapping
    return {}


def label_teams(
    snapshots: Sequence[Snapshot], division: str, labels: Sequence[str], team_names: Mapping[str, str]
) -> Dict[str, str]:
    """Full team name per leaderboard label, from the newest snapshot listing that name.

    Stats pages carry team abbreviations; unknown abbreviations are kept as-is.
    """
    out: Dict[str, str] = {}
    for snapshot in reversed(snapshots):
        for record in snapshot.divisions.get(division, []):
            name = getattr(record, "name")
            if name in labels and name not in out:
                abbr = getattr(record, "team", "")
                out[name] = team_names.get(abbr, abbr)
    return out
