#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Run the loadout API server (FastAPI + Uvicorn).

Usage:
  python3 devtools/serve_loadouts.py --host 0.0.0.0 --port 20000
  python3 devtools/serve_loadouts.py --reload   # restart on code changes

`--reload` needs an import string, so the options are passed to the worker
through LOADOUT_* environment variables and `create_app_from_env` rebuilds
the app there.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import uvicorn  # type: ignore  # noqa: E402

from apps.loadouts import app as app_module  # noqa: E402
from apps.loadouts.settings import LoadoutApiSettings  # noqa: E402
from core.config import loadout_config  # noqa: E402

FACTORY = "apps.loadouts.app:create_app_from_env"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terraria Loadout Lab API (FastAPI) server.")
    parser.add_argument(
        "--data-dir",
        default=os.environ.get(app_module.ENV_DATA_DIR, "") or str(loadout_config.data_dir()),
        help="Directory with bosses-<mod>.json",
    )
    parser.add_argument(
        "--overrides",
        default=os.environ.get(app_module.ENV_OVERRIDES, "") or str(loadout_config.overrides_path() or ""),
        help="Image override JSON (layered over the built-in tables)",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--root-path", default="", help="Reverse proxy mount path, e.g. /loadouts")
    parser.add_argument("--reload", action="store_true", help="Auto-reload code (development)")
    parser.add_argument("--reload-tables", action="store_true", help="Rebuild the boss index when tables change")
    parser.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug", "trace"])
    parser.add_argument("--cors-allow-origin", action="append", default=[], help="CORS allow origin (repeatable)")
    return parser


def _export_env(args: argparse.Namespace, data_dir: Path, overrides: Optional[Path]) -> None:
    os.environ[app_module.ENV_DATA_DIR] = str(data_dir)
    os.environ[app_module.ENV_OVERRIDES] = str(overrides or "")
    os.environ[app_module.ENV_ROOT_PATH] = str(args.root_path or "")
    os.environ[app_module.ENV_CORS] = ",".join(args.cors_allow_origin)
    os.environ[app_module.ENV_RELOAD_TABLES] = "1" if args.reload_tables else ""


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    data_dir = Path(args.data_dir).expanduser().resolve()
    if not data_dir.is_dir():
        print(f"❌ Data dir not found: {data_dir}")
        sys.exit(2)
    overrides = Path(args.overrides).expanduser().resolve() if args.overrides else None

    rp = LoadoutApiSettings.normalize_root_path(args.root_path)
    print(f"Loadout Lab API: http://{args.host}:{int(args.port)}{rp}/docs")
    print(f"Data: {data_dir}")

    common = dict(
        host=str(args.host),
        port=int(args.port),
        log_level=args.log_level,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
    if args.reload:
        _export_env(args, data_dir, overrides)
        uvicorn.run(
            FACTORY,
            factory=True,
            reload=True,
            reload_dirs=[str(PROJECT_ROOT / "apps"), str(PROJECT_ROOT / "core")],
            app_dir=str(PROJECT_ROOT),
            **common,
        )
        return

    settings = LoadoutApiSettings.from_config(
        loadout_config,
        data_dir=data_dir,
        overrides_path=overrides,
        root_path=args.root_path,
        cors_allow_origins=list(args.cors_allow_origin),
        auto_reload_tables=bool(args.reload_tables),
    )
    uvicorn.run(app_module.create_app_from_settings(settings), **common)


if __name__ == "__main__":
    main()
