#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Show the wiki image URL for a name and every fallback a display would try.

Examples
- loadout icon "Terra Blade"
- loadout icon "Auric Tesla Royal Helm" --mod calamity
- loadout icon "Providence, the Profaned Goddess" --mod calamity --boss
"""

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
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from apps.cli.cli_common import load_resolver, mod_label  # noqa: E402
from core.terraria.models import DEFAULT_ICON_SIZE, parse_mod  # noqa: E402

console = Console()

# data URIs are long; the table only needs the head
_URI_PREVIEW = 48


def _short(url: str) -> str:
    if url.startswith("data:") and len(url) > _URI_PREVIEW:
        return url[:_URI_PREVIEW] + "…"
    return url


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Wiki image URL + fallback ladder")
    p.add_argument("name", help="item or boss display name")
    p.add_argument("--mod", default="", help="vanilla | calamity | thorium")
    p.add_argument("--boss", action="store_true", help="use boss naming + boss overrides")
    p.add_argument("--size", type=int, default=DEFAULT_ICON_SIZE, help="placeholder size in px")
    args = p.parse_args(argv)

    resolver = load_resolver()
    mod = args.mod or None
    if mod and parse_mod(mod) is None:
        console.print(f"[yellow]Unknown mod {escape(mod)!r}: using the vanilla wiki.[/yellow]")

    steps = resolver.ladder(args.name, mod, boss=args.boss, size=args.size)
    kind = "boss" if args.boss else "item"
    console.print(Panel(
        f"[bold]{escape(args.name)}[/bold] ({kind}, {mod_label(mod or 'vanilla')})\n{escape(steps[0].url)}",
        title="Primary",
        border_style="cyan",
    ))

    table = Table(title="Fallback ladder", border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Stage", justify="right", style="cyan")
    table.add_column("URL")
    for i, step in enumerate(steps[1:], start=1):
        stage = f"{step.stage} [green](final)[/green]" if step.final else str(step.stage)
        table.add_row(str(i), stage, escape(_short(step.url)))
    console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
