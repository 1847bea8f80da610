# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from core.config import ConfigLoader, loadout_config
from core.terraria.progression import SENTINEL_RANK


@dataclass(frozen=True)
class LoadoutApiSettings:
    """Everything `create_app_from_settings` needs.

    `from_config` fills the data side from conf/settings.ini; the serving side
    (root path, CORS, reload) comes from the launcher's flags.
    """

    data_dir: Path
    overrides_path: Optional[Path] = None
    base_paths: Optional[Dict[str, str]] = None
    sentinel_rank: int = SENTINEL_RANK
    root_path: str = ""
    cors_allow_origins: List[str] = field(default_factory=list)
    gzip_minimum_size: int = 800
    auto_reload_tables: bool = False

    @classmethod
    def from_config(cls, cfg: Optional[ConfigLoader] = None, **overrides) -> "LoadoutApiSettings":
        cfg = cfg or loadout_config
        values = {
            "data_dir": cfg.data_dir(),
            "overrides_path": cfg.overrides_path(),
            "base_paths": cfg.base_paths(),
            "sentinel_rank": cfg.sentinel_rank(),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @staticmethod
    def normalize_root_path(root_path: str) -> str:
        """'' or '/mount' (leading slash, no trailing slash)."""
        rp = (root_path or "").strip().strip("/")
        return "/" + rp if rp else ""
