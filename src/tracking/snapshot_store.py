"""Dated JSON snapshot persistence plus the per-kind index file.

The index is an explicit `SnapshotIndex` object: callers load it from the
store, hand it back to `save`, and the store records the snapshot date and
rewrites both files. Nothing here knows how snapshots are produced.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence

from config import settings
from core import filesystem
from domain.models import Snapshot, SnapshotIndex, SnapshotKind
from parsing.errors import SnapshotFormatError
from utils import naming

log = logging.getLogger(__name__)


class SnapshotExistsError(FileExistsError):
    """Raised when saving over an existing dated snapshot without force."""


class SnapshotStore:
    def __init__(
        self,
        kind: SnapshotKind,
        base_dir: str | None = None,
        division_names: Sequence[str] = settings.DIVISION_NAMES,
    ):
        self.kind = kind
        self.base_dir = base_dir or naming.data_dir()
        self._division_names = list(division_names)

    @property
    def index_path(self) -> str:
        return naming.index_path(self.base_dir, self.kind)

    def snapshot_path(self, date: str) -> str:
        return os.path.join(
            naming.snapshots_dir(self.base_dir, self.kind), naming.snapshot_filename(date)
        )

    def exists(self, date: str) -> bool:
        return os.path.exists(self.snapshot_path(date))

    # Index -------------------------------------------------------------
    def load_index(self) -> SnapshotIndex:
        """Load the index file, or a fresh empty index when none exists yet."""
        if not os.path.exists(self.index_path):
            return SnapshotIndex.empty(self._division_names)
        raw = filesystem.read_json(self.index_path)
        if not isinstance(raw, dict):
            raise SnapshotFormatError("Index must be a JSON object", context={"path": self.index_path})
        return SnapshotIndex.from_dict(raw)

    def write_index(self, index: SnapshotIndex) -> None:
        filesystem.write_json(self.index_path, index.to_dict())
        log.info("Updated %s index file: %s", self.kind.value, self.index_path)

    # Snapshots ---------------------------------------------------------
    def save(self, snapshot: Snapshot, index: SnapshotIndex, *, force: bool = False) -> str:
        path = self.snapshot_path(snapshot.date)
        if not force and os.path.exists(path):
            raise SnapshotExistsError(f"Snapshot already exists: {path}")
        filesystem.write_json(path, snapshot.to_dict())
        log.info("Saved %s snapshot to: %s", self.kind.value, path)
        index.record_date(snapshot.date)
        self.write_index(index)
        return path

    def load(self, date: str) -> Snapshot:
        path = self.snapshot_path(date)
        raw = filesystem.read_json(path)
        if not isinstance(raw, dict):
            raise SnapshotFormatError("Snapshot must be a JSON object", context={"path": path})
        return Snapshot.from_dict(raw, self.kind)

    def load_all(self, index: Optional[SnapshotIndex] = None) -> List[Snapshot]:
        """Every indexed snapshot, oldest first; files missing on disk are skipped."""
        index = index or self.load_index()
        snapshots: List[Snapshot] = []
        for date in index.dates:
            if not self.exists(date):
                log.warning("Failed to load %s snapshot for %s", self.kind.value, date)
                continue
            snapshots.append(self.load(date))
        snapshots.sort(key=lambda s: s.date)
        return snapshots

    def latest_before(self, date: str) -> Optional[Snapshot]:
        """Most recent stored snapshot strictly older than date, if any."""
        for candidate in self.load_index().dates:
            if candidate < date and self.exists(candidate):
                return self.load(candidate)
        return None
