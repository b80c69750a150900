"""Debug artifact helpers for the extractor CLI."""

from __future__ import annotations

import json
import os

from .logging import jlog
from .snapshot import CardSnapshot, card_snapshot_to_payload

DEBUG_DIR = "media/debug"


def ensure_debug_dir(path: str = DEBUG_DIR) -> str:
    """Create the debug directory if it does not exist and return the path."""

    os.makedirs(path, exist_ok=True)
    return path


def dump_snapshot(snapshot: CardSnapshot, name: str, *, directory: str = DEBUG_DIR) -> str | None:
    """Persist a snapshot payload as JSON so the extraction can be replayed offline."""

    try:
        ensure_debug_dir(directory)
        path = os.path.join(directory, f"snapshot_{name}.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(card_snapshot_to_payload(snapshot), fh, ensure_ascii=False, indent=2)
        return path
    except OSError as exc:
        jlog("error", event="debug_snapshot_error", name=name, error=str(exc))
        return None


__all__ = ["DEBUG_DIR", "dump_snapshot", "ensure_debug_dir"]
