#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""List bosses in progression order (all mods, one ranking)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402
from rich.table import Table  # noqa: E402

from apps.cli.cli_common import load_index, mod_label  # noqa: E402
from core.terraria.models import Boss  # noqa: E402
from core.terraria.progression import ProgressionIndex  # noqa: E402

console = Console()


def select(index: ProgressionIndex, mod: str = "", stage: str = "") -> List[Boss]:
    rows = index.by_mod(mod) if mod else index.all()
    if stage:
        key = stage.strip().lower()
        rows = [b for b in rows if b.progression.lower() == key]
    return rows


def render(index: ProgressionIndex, rows: List[Boss], title: str) -> Table:
    table = Table(title=title, border_style="blue")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Boss", style="bold")
    table.add_column("Mod")
    table.add_column("Order", justify="right", style="dim")
    table.add_column("Stage", style="magenta")
    for boss in rows:
        table.add_row(
            str(index.position(boss)),
            boss.name,
            mod_label(boss.mod),
            str(boss.order or "-"),
            boss.progression or "-",
        )
    return table


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Boss progression order")
    p.add_argument("--mod", default="", help="vanilla | calamity | thorium")
    p.add_argument("--stage", default="", help="pre-hardmode | hardmode | post-moonlord")
    args = p.parse_args(argv)

    index = load_index()
    if not len(index):
        console.print("[red]No boss tables loaded.[/red] Run [bold]loadout doctor[/bold] for details.")
        return 1

    rows = select(index, args.mod, args.stage)
    filters = ", ".join(x for x in (args.mod, args.stage) if x) or "all"
    console.print(render(index, rows, f"Boss progression ({filters}: {len(rows)}/{len(index)})"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
