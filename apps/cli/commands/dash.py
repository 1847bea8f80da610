#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import difflib
import sys
from pathlib import Path
from typing import Any, List, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich import box  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from apps.cli.cli_common import DATA_DIR, FileStat, env_hint, load_index  # noqa: E402
from apps.cli.registry import get_tools  # noqa: E402
from core.terraria.tables import TABLE_MODS, table_path  # noqa: E402
from core.version import versions  # noqa: E402

console = Console()


def _kv_table(rows: List[Tuple[str, Any]]) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column(justify="right", style="bold", no_wrap=True)
    table.add_column(ratio=1)
    for key, value in rows:
        table.add_row(str(key), value if value is not None else "-")
    return table


def _suggest(typo: str) -> List[str]:
    aliases = [str(t.get("alias")) for t in get_tools()]
    return difflib.get_close_matches(typo, aliases, n=3, cutoff=0.5)


def main() -> int:
    args = sys.argv[1:]
    if args:
        hint = ", ".join(_suggest(args[0])) or "-"
        console.print(f"[yellow]Unknown command {escape(args[0])!r}.[/yellow] Did you mean: {hint}")

    ver = versions()
    env_name, env_kind = env_hint()
    index = load_index()
    console.print(Panel(
        _kv_table([
            ("version", ver.get("project_version")),
            ("env", f"{env_name} ({env_kind})"),
            ("data", str(DATA_DIR)),
            ("bosses", str(len(index))),
        ]),
        title="Loadout Lab",
        title_align="left",
        border_style="cyan",
        box=box.MINIMAL,
    ))

    data = Table(title="Boss tables", border_style="blue")
    data.add_column("Mod", style="bold")
    data.add_column("Rows", justify="right")
    data.add_column("Updated", style="dim")
    for mod in TABLE_MODS:
        stat = FileStat.of(table_path(DATA_DIR, mod))
        rows = len(index.by_mod(mod.value))
        data.add_row(mod.value, str(rows) if stat.exists else "[red]missing[/red]", stat.updated)
    console.print(data)

    tools = Table(title="Tools", border_style="blue")
    tools.add_column("Alias", style="cyan")
    tools.add_column("Type", style="dim")
    tools.add_column("Description")
    tools.add_column("Usage", style="green")
    for t in get_tools():
        tools.add_row(t.get("alias", ""), t.get("type", ""), t.get("desc", ""), escape(t.get("usage", "")))
    console.print(tools)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
