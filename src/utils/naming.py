"""Centralized filename and path naming utilities."""

from __future__ import annotations

import os

from config import settings
from domain.models import SnapshotKind

INDEX_FILENAME = "index.json"
SNAPSHOTS_DIRNAME = "snapshots"

# Standings live at the data root for compatibility with the dashboard's paths
_KIND_SUBDIRS = {
    SnapshotKind.STANDINGS: "",
    SnapshotKind.PLAYER_STATS: "player-stats",
    SnapshotKind.GOALIE_STATS: "goalie-stats",
}


def kind_dir(base: str, kind: SnapshotKind) -> str:
    sub = _KIND_SUBDIRS[kind]
    return os.path.join(base, sub) if sub else base


def snapshots_dir(base: str, kind: SnapshotKind) -> str:
    return os.path.join(kind_dir(base, kind), SNAPSHOTS_DIRNAME)


def snapshot_filename(date: str) -> str:
    return f"{date}.json"


def index_path(base: str, kind: SnapshotKind) -> str:
    return os.path.join(kind_dir(base, kind), INDEX_FILENAME)


def data_dir() -> str:
    return settings.DATA_DIR
