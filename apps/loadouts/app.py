# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from core.config import loadout_config
from core.terraria.images import ImageResolver
from core.terraria.overrides import OverrideTables, load_override_tables
from core.terraria.progression import SENTINEL_RANK

from . import __version__
from .api import router as api_router
from .boss_store import BossTableStore
from .settings import LoadoutApiSettings

logger = logging.getLogger(__name__)


def create_app(
    data_dir: Path,
    *,
    overrides_path: Optional[Path] = None,
    overrides: Optional[OverrideTables] = None,
    base_paths: Optional[Mapping[str, str]] = None,
    sentinel_rank: int = SENTINEL_RANK,
    root_path: str = "",
    cors_allow_origins: Optional[Sequence[str]] = None,
    gzip_minimum_size: int = 800,
    auto_reload_tables: bool = False,
) -> FastAPI:
    """FastAPI app factory.

    `overrides` (already built tables) takes precedence over `overrides_path`.
    """

    rp = LoadoutApiSettings.normalize_root_path(root_path)

    app = FastAPI(
        title="Terraria Loadout Lab API",
        version=__version__,
        root_path=rp,
        docs_url="/docs",
        redoc_url=None,
    )

    # state
    tables = overrides if overrides is not None else load_override_tables(overrides_path)
    app.state.resolver = ImageResolver(tables, base_paths=base_paths)
    app.state.boss_store = BossTableStore(Path(data_dir), sentinel=sentinel_rank)
    app.state.auto_reload_tables = bool(auto_reload_tables)
    logger.info("loadout api: data_dir=%s bosses=%d", data_dir, len(app.state.boss_store.index()))

    # middleware
    if gzip_minimum_size and gzip_minimum_size > 0:
        app.add_middleware(GZipMiddleware, minimum_size=int(gzip_minimum_size))

    if cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_allow_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # routes
    app.include_router(api_router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


def create_app_from_settings(settings: LoadoutApiSettings, **kwargs) -> FastAPI:
    """Keyword arguments win over the settings."""
    options = {
        "overrides_path": settings.overrides_path,
        "base_paths": settings.base_paths,
        "sentinel_rank": settings.sentinel_rank,
        "root_path": settings.root_path,
        "cors_allow_origins": settings.cors_allow_origins or None,
        "gzip_minimum_size": settings.gzip_minimum_size,
        "auto_reload_tables": settings.auto_reload_tables,
    }
    options.update(kwargs)
    return create_app(settings.data_dir, **options)


# Environment handed from devtools/serve_loadouts.py to reloading workers.
ENV_DATA_DIR = "LOADOUT_DATA_DIR"
ENV_OVERRIDES = "LOADOUT_OVERRIDES"
ENV_ROOT_PATH = "LOADOUT_ROOT_PATH"
ENV_CORS = "LOADOUT_CORS_ALLOW_ORIGINS"
ENV_RELOAD_TABLES = "LOADOUT_RELOAD_TABLES"


def create_app_from_env() -> FastAPI:
    """Zero-argument factory for `uvicorn --factory` (needed by `--reload`).

    The data dir comes from config (`LOADOUT_DATA_DIR` wins there); the other
    serving options are read from the LOADOUT_* variables above.
    """
    overrides = os.environ.get(ENV_OVERRIDES, "").strip()
    cors = [o.strip() for o in os.environ.get(ENV_CORS, "").split(",") if o.strip()]
    settings = LoadoutApiSettings.from_config(
        loadout_config,
        overrides_path=Path(overrides) if overrides else None,
        root_path=os.environ.get(ENV_ROOT_PATH, ""),
        cors_allow_origins=cors,
        auto_reload_tables=os.environ.get(ENV_RELOAD_TABLES, "") == "1",
    )
    return create_app_from_settings(settings)
