# -*- coding: utf-8 -*-
"""Load the static boss tables (data/bosses-<mod>.json).

Each file is a JSON list of boss objects:

    {"id": 3, "name": "Eater of Worlds", "mod": "vanilla",
     "progression": "pre-hardmode", "order": 3}

Rows that cannot be used are logged and skipped; a missing file is an empty
table. Pass `strict=True` to raise `TableError` for an unreadable file instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from core.terraria.models import Boss, Mod, parse_mod
from core.terraria.progression import SENTINEL_RANK, ProgressionIndex

logger = logging.getLogger(__name__)

TABLE_MODS: Tuple[Mod, ...] = (Mod.VANILLA, Mod.CALAMITY, Mod.THORIUM)

# Boss / item ids are partitioned per mod.
_ID_RANGES: Dict[Mod, Tuple[int, int]] = {
    Mod.VANILLA: (1, 99999),
    Mod.CALAMITY: (100000, 199999),
    Mod.THORIUM: (200000, 299999),
}


class TableError(RuntimeError):
    pass


def table_path(data_dir: Path, mod: Mod) -> Path:
    return Path(data_dir) / f"bosses-{mod.value}.json"


def id_range_for(mod: Any) -> Optional[Tuple[int, int]]:
    m = parse_mod(mod)
    return _ID_RANGES.get(m) if m is not None else None


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def boss_from_dict(row: Any, default_mod: str = "") -> Optional[Boss]:
    if not isinstance(row, dict):
        return None
    name = str(row.get("name") or "").strip()
    if not name:
        return None
    boss_id = _to_int(row.get("id"))
    if boss_id is None:
        return None
    return Boss(
        id=boss_id,
        name=name,
        mod=str(row.get("mod") or default_mod or "").strip().lower(),
        order=_to_int(row.get("order")) or 0,
        progression=str(row.get("progression") or "").strip(),
        health=_to_int(row.get("health")),
        defense=_to_int(row.get("defense")),
        image_url=(str(row.get("imageUrl") or "").strip() or None),
    )


def load_boss_table(path: Path, mod: Any = "", *, strict: bool = False) -> List[Boss]:
    p = Path(path)
    m = parse_mod(mod)
    default_mod = m.value if m is not None else str(mod or "").strip().lower()
    if not p.exists():
        if strict:
            raise TableError(f"boss table not found: {p}")
        logger.warning("boss table not found: %s", p)
        return []
    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        if strict:
            raise TableError(f"boss table unreadable: {p}: {e}") from e
        logger.warning("boss table unreadable: %s (%s)", p, e)
        return []
    if not isinstance(doc, list):
        if strict:
            raise TableError(f"boss table must be a JSON list: {p}")
        logger.warning("boss table must be a JSON list: %s", p)
        return []

    out: List[Boss] = []
    rng = id_range_for(default_mod)
    for i, row in enumerate(doc):
        boss = boss_from_dict(row, default_mod)
        if boss is None:
            logger.warning("%s[%d]: skipped (needs name + numeric id)", p.name, i)
            continue
        if rng and not (rng[0] <= boss.id <= rng[1]):
            logger.warning("%s: id %d of %r outside %d..%d", p.name, boss.id, boss.name, rng[0], rng[1])
        out.append(boss)
    return out


def load_boss_tables(data_dir: Path, *, strict: bool = False) -> Dict[str, List[Boss]]:
    """All per-mod tables, keyed by mod, in priority order."""
    return {m.value: load_boss_table(table_path(data_dir, m), m, strict=strict) for m in TABLE_MODS}


def load_progression_index(
    data_dir: Path,
    *,
    sentinel: int = SENTINEL_RANK,
    strict: bool = False,
) -> ProgressionIndex:
    index = ProgressionIndex.build(load_boss_tables(data_dir, strict=strict), sentinel=sentinel)
    logger.info("progression index: %d bosses from %s", len(index), data_dir)
    return index
