#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""`loadout <alias> [args...]`: run a registered tool script.

Tools are plain scripts (apps/cli/commands, devtools) executed with runpy so
each keeps its own argparse. No alias opens the dashboard; an unknown alias
opens it too, with the typo passed along for a suggestion.
"""

from __future__ import annotations

import runpy
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.registry import get_tools  # noqa: E402

DEFAULT_ALIAS = "dash"
DEFAULT_FOLDER = "apps/cli/commands"


def find_tool(key: str) -> Optional[Dict[str, str]]:
    """Registry entry by alias or script file name."""
    for tool in get_tools():
        if key in (tool.get("alias"), tool.get("file")):
            return tool
    return None


def tool_script(tool: Dict[str, str]) -> Path:
    return PROJECT_ROOT / (tool.get("folder") or DEFAULT_FOLDER) / str(tool.get("file"))


def _resolve_tool(alias: Optional[str]) -> Tuple[Path, List[str]]:
    """Return (script, extra leading args)."""
    dash = find_tool(DEFAULT_ALIAS)
    fallback = tool_script(dash) if dash else PROJECT_ROOT / DEFAULT_FOLDER / "dash.py"

    key = str(alias or "").strip()
    if not key:
        return fallback, []
    tool = find_tool(key)
    if tool is None:
        return fallback, [key]
    return tool_script(tool), []


def _print_tools() -> None:
    width = max(len(str(t.get("alias"))) for t in get_tools())
    for tool in get_tools():
        print(f"{str(tool.get('alias')).ljust(width)}  {tool.get('desc', '')}")


def main(argv: Optional[List[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    if args[:1] == ["--list"]:
        _print_tools()
        return

    script, extra = _resolve_tool(args[0] if args else None)
    sys.argv = [str(script)] + extra + args[1:]
    runpy.run_path(str(script), run_name="__main__")


if __name__ == "__main__":
    main()
