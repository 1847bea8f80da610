#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared helpers for the loadout CLI tools."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple

from core.config import loadout_config
from core.terraria.images import ImageResolver
from core.terraria.progression import ProgressionIndex
from core.terraria.runtime import index_from_config, resolver_from_config

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "conf" / "settings.ini"
DATA_DIR = loadout_config.data_dir()

MOD_STYLE = {"vanilla": "green", "calamity": "red", "thorium": "yellow"}


@dataclass(frozen=True)
class FileStat:
    path: Path
    exists: bool
    size: int = 0
    mtime: Optional[float] = None

    @classmethod
    def of(cls, path: Path) -> "FileStat":
        try:
            st = Path(path).stat()
        except OSError:
            return cls(Path(path), False)
        return cls(Path(path), True, int(st.st_size), float(st.st_mtime))

    @property
    def updated(self) -> str:
        if not self.mtime:
            return "-"
        return datetime.fromtimestamp(self.mtime).strftime("%Y-%m-%d %H:%M")

    @property
    def human_size(self) -> str:
        return human_size(self.size)


def human_size(num: float) -> str:
    if num <= 0:
        return "-"
    if num < 1024:
        return f"{int(num)} B"
    for unit in ("KiB", "MiB"):
        num /= 1024.0
        if num < 1024:
            return f"{num:.1f} {unit}"
    return f"{num / 1024.0:.1f} GiB"


def read_json(path: Path) -> Optional[Any]:
    """Parsed JSON, or None when the file is missing or broken."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None


def env_hint() -> Tuple[str, str]:
    for var, kind in (("CONDA_DEFAULT_ENV", "conda"), ("VIRTUAL_ENV", "venv")):
        value = os.environ.get(var, "").strip()
        if value:
            return value, kind
    return "system", "system"


def load_index() -> ProgressionIndex:
    return index_from_config(loadout_config)


def load_resolver() -> ImageResolver:
    return resolver_from_config(loadout_config)


def mod_label(mod: str) -> str:
    style = MOD_STYLE.get(str(mod or "").lower(), "white")
    return f"[{style}]{mod or '-'}[/{style}]"
