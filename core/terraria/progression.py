# -*- coding: utf-8 -*-
"""Boss progression order across mods.

All bosses are put in one list: vanilla first, then Calamity, then Thorium,
each by its in-mod order. A boss's *rank* is its position in that list (not
its `order` field; the two diverge once mods are concatenated).

`rank_of()` is used to sort loadouts by their target boss. It is lenient:
"eater of worlds" finds "The Eater of Worlds", and anything unknown gets
`SENTINEL_RANK` so it sorts last.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from core.terraria.models import Boss, mod_priority, parse_mod

SENTINEL_RANK = 999


def _normalize(name: Optional[str]) -> str:
    return str(name or "").strip().lower()


class ProgressionIndex:
    """Immutable total order of bosses + name -> rank lookup."""

    def __init__(self, bosses: Sequence[Boss], *, sentinel: int = SENTINEL_RANK):
        self._bosses: Tuple[Boss, ...] = tuple(bosses)
        self.sentinel = int(sentinel)
        ranks: Dict[str, int] = {}
        for idx, boss in enumerate(self._bosses):
            # Duplicate names: the later boss owns the rank.
            ranks[boss.name.lower()] = idx
        self._ranks = ranks

    @classmethod
    def build(
        cls,
        tables: Mapping[str, Sequence[Boss]],
        *,
        sentinel: int = SENTINEL_RANK,
    ) -> "ProgressionIndex":
        """Sort every table's bosses by (mod priority, order).

        `sorted` is stable, so equal keys keep table order.
        """
        rows: List[Boss] = []
        for table_mod, bosses in tables.items():
            for boss in bosses or ():
                if not boss.mod and table_mod:
                    boss = replace(boss, mod=str(table_mod))
                rows.append(boss)
        rows.sort(key=lambda b: (mod_priority(b.mod), b.sort_order))
        return cls(rows, sentinel=sentinel)

    def __len__(self) -> int:
        return len(self._bosses)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._ranks

    # ----------------- lookups -----------------
    def rank_of(self, name: Optional[str]) -> int:
        """0-based progression rank, or the sentinel when nothing matches.

        Exact (case-insensitive) match first, then the first entry whose name
        contains the query or is contained in it.
        """
        return self.lookup(name)[0]

    def lookup(self, name: Optional[str]) -> Tuple[int, str]:
        """Return (rank, how) with how in "exact", "partial", "unknown"."""
        query = _normalize(name)
        if not query:
            return self.sentinel, "unknown"

        exact = self._ranks.get(query)
        if exact is not None:
            return exact, "exact"

        # First hit in table order wins when several names overlap.
        for known, rank in self._ranks.items():
            if query in known or known in query:
                return rank, "partial"

        return self.sentinel, "unknown"

    def is_known(self, name: Optional[str]) -> bool:
        return self.lookup(name)[1] != "unknown"

    def find(self, name: Optional[str]) -> Optional[Boss]:
        query = _normalize(name)
        if not query:
            return None
        for boss in self._bosses:
            if boss.name.lower() == query:
                return boss
        return None

    def all(self) -> List[Boss]:
        return list(self._bosses)

    def position(self, boss: Boss) -> int:
        """Index of this exact row in the total order (sentinel if absent).

        Differs from `rank_of(boss.name)` only for duplicated names.
        """
        for idx, row in enumerate(self._bosses):
            if row is boss:
                return idx
        return self.sentinel

    def by_mod(self, mod: str) -> List[Boss]:
        m = parse_mod(mod)
        key = m.value if m is not None else _normalize(mod)
        return [b for b in self._bosses if _normalize(b.mod) == key]

    def by_progression(self, stage: str) -> List[Boss]:
        key = _normalize(stage)
        return [b for b in self._bosses if _normalize(b.progression) == key]

    def ranks(self) -> Dict[str, int]:
        return dict(self._ranks)

    # ----------------- sorting -----------------
    def sort_records(self, records: Iterable[Any], key: str = "target_boss") -> List[Any]:
        """Stable sort of dicts / objects by the rank of their `key` field."""

        def _rank(rec: Any) -> int:
            if isinstance(rec, Mapping):
                value = rec.get(key)
            else:
                value = getattr(rec, key, None)
            return self.rank_of(value if isinstance(value, str) else None)

        return sorted(records, key=_rank)
