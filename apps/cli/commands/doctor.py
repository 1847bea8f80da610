#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import importlib.util
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from apps.cli.cli_common import CONFIG_PATH, FileStat, env_hint, read_json  # noqa: E402
from core.config import loadout_config  # noqa: E402
from core.terraria.tables import TABLE_MODS, id_range_for, table_path  # noqa: E402

console = Console()
RUNTIME_MODULES = ("fastapi", "pydantic", "uvicorn", "rich", "PIL")


def _status(level: str) -> str:
    if level == "PASS":
        return "[green]PASS[/green]"
    if level == "WARN":
        return "[yellow]WARN[/yellow]"
    return "[red]FAIL[/red]"


def check_boss_table(path: Path, mod: str) -> Tuple[str, str]:
    """Return (level, details) for one bosses-<mod>.json file."""
    stat = FileStat.of(path)
    if not stat.exists:
        return "FAIL", "missing"
    doc = read_json(path)
    if not isinstance(doc, list):
        return "FAIL", "not a JSON list"

    problems: List[str] = []
    rng = id_range_for(mod)
    orders = Counter()
    for row in doc:
        if not isinstance(row, dict) or not str(row.get("name") or "").strip():
            problems.append("row without name")
            continue
        rid = row.get("id")
        if rng and isinstance(rid, int) and not (rng[0] <= rid <= rng[1]):
            problems.append(f"id {rid} outside {rng[0]}..{rng[1]}")
        order = row.get("order")
        if isinstance(order, int) and not isinstance(order, bool):
            if order:
                orders[order] += 1
        elif order not in (None, ""):
            problems.append(f"order {order!r} is not an integer")
    dup = sorted(str(o) for o, n in orders.items() if n > 1)
    if dup:
        problems.append("duplicate order " + ",".join(dup))

    details = f"{len(doc)} bosses | {stat.updated} | {stat.human_size}"
    if problems:
        return "WARN", details + " | " + "; ".join(problems[:3])
    return "PASS", details


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Loadout Doctor (config + data health check)")
    p.add_argument("--enforce", action="store_true", help="exit non-zero on failures (CI)")
    p.add_argument("--strict", action="store_true", help="treat WARN as FAIL (only when --enforce)")
    args = p.parse_args(argv)

    env_name, env_kind = env_hint()
    console.print(Panel(f"[bold cyan]Loadout Doctor[/bold cyan]\nEnv: {env_name} ({env_kind})", border_style="cyan"))

    table = Table(title="Health Checks", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Details", style="dim")
    table.add_column("Fix Hint", style="green")

    fail = 0
    warn = 0

    # 1) config file (optional, defaults apply)
    ok = CONFIG_PATH.is_file()
    table.add_row("conf/settings.ini", _status("PASS" if ok else "WARN"), str(CONFIG_PATH), "" if ok else "Optional: built-in defaults are used")
    if not ok:
        warn += 1

    # 2) data tables
    data_dir = loadout_config.data_dir()
    if not data_dir.is_dir():
        table.add_row("data dir", _status("FAIL"), str(data_dir), "Set [PATHS] DATA_DIR or LOADOUT_DATA_DIR")
        fail += 1
    for mod in TABLE_MODS:
        path = table_path(data_dir, mod)
        level, details = check_boss_table(path, mod.value)
        table.add_row(f"data/{path.name}", _status(level), details, "Fix or regenerate the boss table" if level != "PASS" else "")
        if level == "FAIL":
            fail += 1
        elif level == "WARN":
            warn += 1

    # 3) image overrides (optional)
    ov = loadout_config.overrides_path()
    if ov is not None:
        if not ov.exists():
            table.add_row("image overrides", _status("WARN"), f"{ov} (missing)", "Optional: built-in tables are used")
            warn += 1
        elif not isinstance(read_json(ov), dict):
            table.add_row("image overrides", _status("FAIL"), str(ov), "Must be a JSON object")
            fail += 1
        else:
            table.add_row("image overrides", _status("PASS"), str(ov), "")

    # 4) runtime modules
    for name in RUNTIME_MODULES:
        found = importlib.util.find_spec(name) is not None
        table.add_row(f"import {name}", _status("PASS" if found else "FAIL"), "" if found else "(not installed)", "" if found else "pip install -e .")
        if not found:
            fail += 1

    console.print(table)
    console.print(f"[dim]Root: {PROJECT_ROOT} | Summary: FAIL={fail}, WARN={warn}[/dim]")

    if not args.enforce:
        return 0
    if fail:
        return 2
    if args.strict and warn:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
