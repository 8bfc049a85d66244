"""Print chart-ready trend series built from stored snapshots.

Examples:
  python -m cli.trends --kind standings --division 2-MANNO
  python -m cli.trends --kind player-stats --division 1-BRODEUR --stat points --top 5
  python -m cli.trends --kind goalie-stats --division 2-MANNO --stat gaa
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict, Sequence

from config import settings
from domain.models import Snapshot, SnapshotKind
from parsing.errors import ParsingError
from services import trends
from tracking.snapshot_store import SnapshotStore

log = logging.getLogger("cli.trends")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build trend series from stored snapshots")
    p.add_argument("--kind", choices=[k.value for k in SnapshotKind], default="standings")
    p.add_argument("--division", required=True, choices=list(settings.DIVISION_NAMES))
    p.add_argument("--stat", help="Stat to rank by (player: goals/assists/points; goalie: so/gaa/svPct)")
    p.add_argument("--top", type=int, default=settings.DEFAULT_TOP_N, help="Leaderboard size")
    p.add_argument("--data-dir", type=str, help="Override data directory")
    return p.parse_args(argv)


def build_series(
    kind: SnapshotKind, snapshots: Sequence[Snapshot], args: argparse.Namespace
) -> trends.SeriesSet:
    if kind is SnapshotKind.STANDINGS:
        return trends.standings_position_series(snapshots, args.division)
    if kind is SnapshotKind.PLAYER_STATS:
        stat = args.stat or "points"
        if stat not in trends.PLAYER_STATS:
            raise ValueError(f"Unknown player stat: {stat}")
        return trends.leaderboard_series(
            snapshots, args.division, trends.PLAYER_STATS[stat], top_n=args.top
        )
    stat = args.stat or "svPct"
    if stat not in trends.GOALIE_STATS:
        raise ValueError(f"Unknown goalie stat: {stat}")
    return trends.goalie_leaderboard_series(snapshots, args.division, stat, top_n=args.top)


def build_payload(kind: SnapshotKind, data_dir: str, args: argparse.Namespace) -> Dict[str, Any]:
    snapshots = SnapshotStore(kind, data_dir).load_all()
    series = build_series(kind, snapshots, args)
    payload: Dict[str, Any] = dict(series.to_mapping())
    if kind is not SnapshotKind.STANDINGS:
        # Stats pages only carry team abbreviations
        team_names = trends.team_name_map(SnapshotStore(SnapshotKind.STANDINGS, data_dir).load_all())
        labels = [s.label for s in series.series]
        payload["teams"] = trends.label_teams(snapshots, args.division, labels, team_names)
    return payload


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    kind = SnapshotKind(args.kind)
    try:
        payload = build_payload(kind, args.data_dir or settings.DATA_DIR, args)
    except ValueError as e:
        print(f"error: {e}")
        return 2
    except (ParsingError, OSError):
        log.exception("Failed to load %s snapshots", kind.value)
        return 1
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
