"""Cross-check of standings division membership between two snapshots.

Standings tables are assigned to divisions by page order. If the site ever
reorders its tables, teams silently land in the wrong division; comparing
each division's team set with the previous snapshot surfaces that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from domain.models import Snapshot

__all__ = ["DivisionDrift", "compare_division_rosters"]


@dataclass(frozen=True)
class DivisionDrift:
    division: str
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    # Previous division whose team set equals this division's current one
    matches_previous: Optional[str] = None

    def describe(self) -> str:
        if self.matches_previous:
            return (
                f"{self.division}: teams match previous {self.matches_previous!r}; "
                "standings tables may have changed order"
            )
        return f"{self.division}: added {self.added}, removed {self.removed}"


def _team_sets(snapshot: Snapshot) -> Dict[str, FrozenSet[str]]:
    return {
        name: frozenset(getattr(r, "team", "") for r in records)
        for name, records in snapshot.divisions.items()
    }


def compare_division_rosters(previous: Snapshot, current: Snapshot) -> List[DivisionDrift]:
    """Drift entries for divisions whose membership changed; empty divisions are skipped."""
    before = _team_sets(previous)
    after = _team_sets(current)
    drifts: List[DivisionDrift] = []
    for division, teams in after.items():
        old = before.get(division, frozenset())
        if not teams or not old or teams == old:
            continue
        moved = next(
            (name for name, other in before.items() if name != division and other == teams),
            None,
        )
        drifts.append(
            DivisionDrift(
                division=division,
                added=sorted(teams - old),
                removed=sorted(old - teams),
                matches_previous=moved,
            )
        )
    return drifts
