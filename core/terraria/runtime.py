# -*- coding: utf-8 -*-
"""Build resolver / index objects from project config."""

from __future__ import annotations

from typing import Optional

from core.config import ConfigLoader, loadout_config
from core.terraria.images import ImageResolver
from core.terraria.overrides import load_override_tables
from core.terraria.progression import ProgressionIndex
from core.terraria.tables import load_progression_index


def resolver_from_config(cfg: Optional[ConfigLoader] = None) -> ImageResolver:
    cfg = cfg or loadout_config
    overrides = load_override_tables(cfg.overrides_path())
    return ImageResolver(overrides, base_paths=cfg.base_paths())


def index_from_config(cfg: Optional[ConfigLoader] = None) -> ProgressionIndex:
    cfg = cfg or loadout_config
    return load_progression_index(cfg.data_dir(), sentinel=cfg.sentinel_rank())
