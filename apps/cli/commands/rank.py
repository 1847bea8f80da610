#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.table import Table  # noqa: E402

from apps.cli.cli_common import load_index, mod_label  # noqa: E402

console = Console()

_MATCH_STYLE = {"exact": "green", "partial": "yellow", "unknown": "red"}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Progression rank lookup")
    p.add_argument("names", nargs="+", help="boss names (case-insensitive, partial ok)")
    args = p.parse_args(argv)

    index = load_index()
    table = Table(title="Boss rank", border_style="blue")
    table.add_column("Query", style="bold")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Match")
    table.add_column("Boss")
    table.add_column("Mod")

    all_bosses = index.all()
    for query in args.names:
        rank, how = index.lookup(query)
        style = _MATCH_STYLE.get(how, "white")
        boss = all_bosses[rank] if how != "unknown" else None
        table.add_row(
            escape(query),
            str(rank),
            f"[{style}]{how}[/{style}]",
            boss.name if boss else "-",
            mod_label(boss.mod) if boss else "-",
        )
    console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
