"""Command line entrypoint for the daily standings / stats scrape.

Scrapes each requested data kind once, validates it, and saves a dated
snapshot plus the kind's index. Kinds whose snapshot for today already
exists are skipped unless --force is given.

Exit code 1 when the standings scrape produced no teams or the run failed.

Example:
  python -m cli.scrape --kind standings --force --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict, List, Sequence

from config import settings
from core import async_http
from core.async_http import AsyncHttpError
from domain.models import Snapshot, SnapshotKind, today_iso
from parsing.errors import ParsingError
from services import pipeline
from tracking import division_order
from tracking.snapshot_store import SnapshotStore

log = logging.getLogger("cli.scrape")

ALL_KINDS = [k.value for k in SnapshotKind]


class NoStandingsError(RuntimeError):
    pass


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="HNA standings tracker - daily scraper")
    p.add_argument("--force", action="store_true", help="Overwrite today's snapshots if present")
    p.add_argument(
        "--kind",
        action="append",
        choices=ALL_KINDS,
        help="Data kind to scrape (repeatable; default: all)",
    )
    p.add_argument("--data-dir", type=str, help="Override output data directory")
    p.add_argument("--json", action="store_true", help="Output JSON summary")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _check_division_order(store: SnapshotStore, snapshot: Snapshot) -> List[str]:
    previous = store.latest_before(snapshot.date)
    if previous is None:
        return []
    notes = [d.describe() for d in division_order.compare_division_rosters(previous, snapshot)]
    for note in notes:
        log.warning("Division drift since %s: %s", previous.date, note)
    return notes


def _validate(kind: SnapshotKind, snapshot: Snapshot) -> None:
    total = snapshot.total_records()
    if total == 0:
        if kind is SnapshotKind.STANDINGS:
            raise NoStandingsError("No teams found in standings data!")
        log.warning("No records found in %s data!", kind.value)
        return
    log.info("Found %d records across %d divisions", total, len(snapshot.divisions))


async def run_scrape(
    kinds: Sequence[SnapshotKind], data_dir: str, *, force: bool, date: str
) -> Dict[str, Any]:
    summary: Dict[str, Any] = {}
    client = async_http.make_client()
    try:
        for kind in kinds:
            store = SnapshotStore(kind, data_dir)
            if not force and store.exists(date):
                log.info("%s snapshot for %s already exists, skipping.", kind.value, date)
                summary[kind.value] = {"skipped": True}
                continue
            snapshot = await pipeline.SCRAPERS[kind](client, date=date)
            _validate(kind, snapshot)
            drift: List[str] = []
            if kind is SnapshotKind.STANDINGS:
                drift = _check_division_order(store, snapshot)
            path = store.save(snapshot, store.load_index(), force=True)
            summary[kind.value] = {
                "path": path,
                "divisions": {name: len(rows) for name, rows in snapshot.divisions.items()},
                "division_drift": drift,
            }
    finally:
        await client.aclose()
    return summary


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    data_dir = args.data_dir or settings.DATA_DIR
    kinds = [SnapshotKind(k) for k in (args.kind or ALL_KINDS)]
    date = today_iso()
    try:
        summary = asyncio.run(run_scrape(kinds, data_dir, force=args.force, date=date))
    except NoStandingsError as e:
        log.error("Error: %s", e)
        return 1
    except (AsyncHttpError, ParsingError, OSError):
        log.exception("Error scraping data")
        return 1
    if args.json:
        print(json.dumps({"date": date, "kinds": summary}, indent=2, ensure_ascii=False))
    else:
        print(f"Scrape summary ({date}):")
        for kind, info in summary.items():
            if info.get("skipped"):
                print(f"  {kind}: skipped (already exists)")
                continue
            print(f"  {kind}: {info['path']}")
            for division, count in info["divisions"].items():
                print(f"    - {division}: {count}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
