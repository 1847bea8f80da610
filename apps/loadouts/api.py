# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from core.terraria.images import ImageResolver
from core.terraria.models import DEFAULT_ICON_SIZE, Boss, FallbackAttemptState, parse_mod
from core.terraria.placeholder import placeholder, render_placeholder_png
from core.terraria.progression import ProgressionIndex
from core.version import versions

from .boss_store import BossTableStore

MIN_ICON_SIZE = 8
MAX_ICON_SIZE = 512


def get_resolver(request: Request) -> ImageResolver:
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(status_code=503, detail="Image resolver not configured")
    return resolver


def get_boss_store(request: Request) -> BossTableStore:
    """Resolve the boss store from app state (with optional auto-reload)."""

    store: BossTableStore = request.app.state.boss_store  # type: ignore[attr-defined]
    if bool(getattr(request.app.state, "auto_reload_tables", False)):
        store.load(force=False)
    return store


def get_index(store: BossTableStore = Depends(get_boss_store)) -> ProgressionIndex:
    return store.index()


router = APIRouter(prefix="/api/v1")


def _boss_row(boss: Boss, index: ProgressionIndex, resolver: Optional[ImageResolver] = None) -> Dict[str, Any]:
    row = boss.to_dict()
    # position of this row; rank_of(name) picks the later row for duplicated names
    row["rank"] = index.position(boss)
    if resolver is not None and not row.get("imageUrl"):
        row["imageUrl"] = resolver.resolve_boss(boss.name, boss.mod)
    return row


class FallbackStateModel(BaseModel):
    entity_name: str = ""
    mod: Optional[str] = None
    # out-of-range stages are clamped by the resolver
    stage: int = 0
    final: bool = False
    size: int = Field(default=DEFAULT_ICON_SIZE, ge=MIN_ICON_SIZE, le=MAX_ICON_SIZE)

    def to_state(self) -> FallbackAttemptState:
        return FallbackAttemptState(
            entity_name=self.entity_name,
            mod=self.mod,
            stage=self.stage,
            final=self.final,
            size=self.size,
        )


class SortRequest(BaseModel):
    records: List[Dict[str, Any]] = Field(default_factory=list)
    key: str = "target_boss"


@router.get("/meta")
def meta(
    resolver: ImageResolver = Depends(get_resolver),
    store: BossTableStore = Depends(get_boss_store),
):
    m: Dict[str, Any] = dict(versions())
    m.update(
        {
            "base_paths": resolver.base_paths,
            "overrides": resolver.overrides.counts(),
            "bosses": store.counts(),
            "sentinel_rank": store.index().sentinel,
        }
    )
    return m


# ----------------- images -----------------


@router.get("/image/item")
def image_item(
    name: str = Query(..., min_length=1),
    mod: Optional[str] = None,
    resolver: ImageResolver = Depends(get_resolver),
):
    return {"name": name, "mod": mod, "url": resolver.resolve(name, mod)}


@router.get("/image/boss")
def image_boss(
    name: str = Query(..., min_length=1),
    mod: Optional[str] = None,
    resolver: ImageResolver = Depends(get_resolver),
):
    return {"name": name, "mod": mod, "url": resolver.resolve_boss(name, mod)}


@router.post("/image/fallback")
def image_fallback(body: FallbackStateModel, resolver: ImageResolver = Depends(get_resolver)):
    url, state = resolver.next_fallback(body.to_state())
    return {"url": url, "state": state.to_dict()}


@router.get("/image/ladder")
def image_ladder(
    name: str = Query(..., min_length=1),
    mod: Optional[str] = None,
    boss: bool = False,
    size: int = Query(DEFAULT_ICON_SIZE, ge=MIN_ICON_SIZE, le=MAX_ICON_SIZE),
    resolver: ImageResolver = Depends(get_resolver),
):
    steps = resolver.ladder(name, mod, boss=boss, size=size)
    return {"steps": [{"stage": s.stage, "url": s.url, "final": s.final} for s in steps]}


@router.get("/image/placeholder")
def image_placeholder(
    text: str = "",
    size: int = Query(DEFAULT_ICON_SIZE, ge=MIN_ICON_SIZE, le=MAX_ICON_SIZE),
):
    return {"url": placeholder(text, size)}


@router.get("/image/placeholder.png")
def image_placeholder_png(
    text: str = "",
    size: int = Query(DEFAULT_ICON_SIZE, ge=MIN_ICON_SIZE, le=MAX_ICON_SIZE),
):
    return Response(
        content=render_placeholder_png(text, size),
        media_type="image/png",
        headers={"Cache-Control": "public, max-age=86400"},
    )


# ----------------- bosses -----------------


@router.get("/bosses")
def bosses(
    mod: Optional[str] = None,
    progression: Optional[str] = None,
    index: ProgressionIndex = Depends(get_index),
    resolver: ImageResolver = Depends(get_resolver),
):
    rows = index.by_mod(mod) if mod else index.all()
    if progression:
        stage = progression.strip().lower()
        rows = [b for b in rows if b.progression.lower() == stage]
    return {"count": len(rows), "bosses": [_boss_row(b, index, resolver) for b in rows]}


@router.get("/bosses/rank")
def boss_rank(name: Optional[str] = None, index: ProgressionIndex = Depends(get_index)):
    rank, how = index.lookup(name)
    return {"name": name, "rank": rank, "match": how, "known": how != "unknown"}


@router.get("/bosses/{name}")
def boss_detail(
    name: str,
    index: ProgressionIndex = Depends(get_index),
    resolver: ImageResolver = Depends(get_resolver),
):
    boss = index.find(name)
    if boss is None:
        raise HTTPException(status_code=404, detail=f"Boss not found: {name}")
    row = _boss_row(boss, index, resolver)
    row["modKnown"] = parse_mod(boss.mod) is not None
    return row


# ----------------- loadouts -----------------


@router.post("/loadouts/sort")
def loadouts_sort(body: SortRequest, index: ProgressionIndex = Depends(get_index)):
    key = body.key.strip() or "target_boss"
    records = index.sort_records(body.records, key=key)
    return {"key": key, "count": len(records), "records": records}
