"""JSONL log of palette scans.

Each engine run appends a ``palette_scan_started`` record when the image is
open and a ``palette_ranked`` record once hit counts are sorted. Records
share a ``run_id`` and carry a per-run ``seq`` number.
"""

from __future__ import annotations

import itertools
import json
import threading
import uuid
from pathlib import Path
from typing import Any, Sequence

from .sampler import ScanStats
from .utils import now_utc_iso

SCAN_STARTED = "palette_scan_started"
RANKED = "palette_ranked"


class EventWriter:
    def __init__(self, path: Path, run_id: str | None = None) -> None:
        self.path = Path(path)
        self.run_id = run_id or uuid.uuid4().hex
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def scan_started(self, source: str, backend: str, width: int, height: int, precision: int) -> dict[str, Any]:
        return self.emit(
            SCAN_STARTED,
            source=source,
            backend=backend,
            width=width,
            height=height,
            precision=precision,
        )

    def ranked(self, stats: ScanStats, colors: Sequence[str]) -> dict[str, Any]:
        return self.emit(
            RANKED,
            sampled=stats.sampled,
            skipped=stats.skipped,
            matched=stats.matched,
            colors=list(colors),
        )

    def emit(self, event_type: str, **payload: Any) -> dict[str, Any]:
        with self._lock:
            record = {"type": event_type, "run_id": self.run_id, "seq": next(self._seq), "ts": now_utc_iso()}
            record.update(payload)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(record) + "\n")
        return record

    def read(self) -> list[dict[str, Any]]:
        """Return this run's records, skipping other runs sharing the file."""

        if not self.path.exists():
            return []
        with self._lock:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        records = (json.loads(line) for line in lines if line.strip())
        return [record for record in records if record.get("run_id") == self.run_id]
