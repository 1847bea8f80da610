#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Export the boss progression index as JSON.

Output (data/index/progression_index_v1.json):
    {
      "meta": {...},
      "sentinel": 999,
      "bosses": [{"rank": 0, "name": "King Slime", "mod": "vanilla", ...}, ...],
      "ranks": {"king slime": 0, ...}
    }

Frontends that cannot call the API can sort loadouts with `ranks` directly.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402

from core.config import loadout_config  # noqa: E402
from core.schemas.meta import build_meta  # noqa: E402
from core.terraria.progression import ProgressionIndex  # noqa: E402
from core.terraria.tables import TABLE_MODS, TableError, load_progression_index, table_path  # noqa: E402

SCHEMA = 1
DEFAULT_OUT = "progression_index_v1.json"

console = Console()


def build_document(index: ProgressionIndex, data_dir: Path) -> Dict[str, Any]:
    bosses: List[Dict[str, Any]] = []
    for rank, boss in enumerate(index.all()):
        row = boss.to_dict()
        row["rank"] = rank
        bosses.append(row)
    counts = {mod.value: len(index.by_mod(mod.value)) for mod in TABLE_MODS}
    sources = [table_path(data_dir, mod) for mod in TABLE_MODS]
    return {
        "meta": build_meta(schema=SCHEMA, tool="build_progression_index", sources=sources, counts=counts),
        "sentinel": index.sentinel,
        "bosses": bosses,
        "ranks": index.ranks(),
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Export boss progression index JSON")
    p.add_argument("--data-dir", default=str(loadout_config.data_dir()))
    p.add_argument("--out", default="", help=f"output path (default: <data-dir>/index/{DEFAULT_OUT})")
    p.add_argument("--strict", action="store_true", help="fail on missing / unreadable tables")
    args = p.parse_args(argv)

    data_dir = Path(args.data_dir).expanduser().resolve()
    out = Path(args.out).expanduser().resolve() if args.out else data_dir / "index" / DEFAULT_OUT

    try:
        index = load_progression_index(data_dir, sentinel=loadout_config.sentinel_rank(), strict=bool(args.strict))
    except TableError as e:
        console.print(f"[red]❌ {e}[/red]")
        return 2
    doc = build_document(index, data_dir)

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]✅ Progression index: {len(index)} bosses -> {out}[/green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
