# -*- coding: utf-8 -*-
from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Tuple

from core.terraria.progression import SENTINEL_RANK, ProgressionIndex
from core.terraria.tables import TABLE_MODS, load_progression_index, table_path


class BossTableStore:
    """Serve a ProgressionIndex built from data/bosses-*.json (thread-safe).

    The index itself is immutable; `load()` builds a new one when any table
    file changed and swaps it in.
    """

    def __init__(self, data_dir: Path, *, sentinel: int = SENTINEL_RANK):
        self._data_dir = Path(data_dir)
        self._sentinel = int(sentinel)
        self._lock = threading.RLock()
        self._sig: Tuple[float, ...] = ()
        self._index = ProgressionIndex((), sentinel=self._sentinel)
        self.load(force=True)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _signature(self) -> Tuple[float, ...]:
        sig = []
        for mod in TABLE_MODS:
            p = table_path(self._data_dir, mod)
            try:
                sig.append(p.stat().st_mtime)
            except OSError:
                sig.append(-1.0)
        return tuple(sig)

    def load(self, force: bool = False) -> bool:
        """Rebuild the index if a table changed. Returns True if rebuilt."""
        with self._lock:
            sig = self._signature()
            if (not force) and sig == self._sig:
                return False
            self._index = load_progression_index(self._data_dir, sentinel=self._sentinel)
            self._sig = sig
            return True

    def index(self) -> ProgressionIndex:
        with self._lock:
            return self._index

    def counts(self) -> Dict[str, int]:
        idx = self.index()
        out = {mod.value: len(idx.by_mod(mod.value)) for mod in TABLE_MODS}
        out["total"] = len(idx)
        return out
