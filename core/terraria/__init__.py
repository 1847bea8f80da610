# -*- coding: utf-8 -*-
"""Terraria image URLs and boss progression order."""

from core.terraria.images import DEFAULT_BASE_PATHS, ImageResolver, encode_name
from core.terraria.models import (
    Boss,
    FallbackAttemptState,
    LadderStep,
    Mod,
    mod_priority,
    parse_mod,
)
from core.terraria.overrides import OverrideTables, default_override_tables, load_override_tables
from core.terraria.placeholder import placeholder, placeholder_png_uri, render_placeholder_png
from core.terraria.progression import SENTINEL_RANK, ProgressionIndex
from core.terraria.tables import TableError, load_boss_table, load_boss_tables, load_progression_index

__all__ = [
    "Boss",
    "DEFAULT_BASE_PATHS",
    "FallbackAttemptState",
    "ImageResolver",
    "LadderStep",
    "Mod",
    "OverrideTables",
    "ProgressionIndex",
    "SENTINEL_RANK",
    "TableError",
    "default_override_tables",
    "encode_name",
    "load_boss_table",
    "load_boss_tables",
    "load_override_tables",
    "load_progression_index",
    "mod_priority",
    "parse_mod",
    "placeholder",
    "placeholder_png_uri",
    "render_placeholder_png",
]
