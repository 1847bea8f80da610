# -*- coding: utf-8 -*-
"""Value types shared by the image resolver and the progression index."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class Mod(str, Enum):
    """Content packs an item or boss can belong to."""

    VANILLA = "vanilla"
    CALAMITY = "calamity"
    THORIUM = "thorium"


# Mods with their own wiki namespace (and the full fallback ladder).
MODDED = (Mod.CALAMITY, Mod.THORIUM)

# Boss tables are concatenated in this order; anything else sorts after.
MOD_PRIORITY: Dict[Mod, int] = {
    Mod.VANILLA: 0,
    Mod.CALAMITY: 1,
    Mod.THORIUM: 2,
}
UNKNOWN_MOD_PRIORITY = 99

# Missing / zero boss order sorts to the end of its mod.
MISSING_ORDER = 999


def parse_mod(value: Any) -> Optional[Mod]:
    """Return the Mod for a loose tag ("Calamity ", Mod.THORIUM, ...), else None."""
    if isinstance(value, Mod):
        return value
    key = str(value or "").strip().lower()
    if not key:
        return None
    try:
        return Mod(key)
    except ValueError:
        return None


def mod_priority(value: Any) -> int:
    mod = parse_mod(value)
    if mod is None:
        return UNKNOWN_MOD_PRIORITY
    return MOD_PRIORITY[mod]


def is_modded(value: Any) -> bool:
    return parse_mod(value) in MODDED


@dataclass(frozen=True)
class Boss:
    """One boss row from the static boss tables.

    `order` is the in-mod progression number (1 = first boss). `mod` keeps the
    raw tag from the table so unknown packs still round-trip.
    """

    id: int
    name: str
    mod: str
    order: int = 0
    progression: str = ""
    health: Optional[int] = None
    defense: Optional[int] = None
    image_url: Optional[str] = None

    @property
    def sort_order(self) -> int:
        return self.order or MISSING_ORDER

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "mod": self.mod,
            "order": self.order,
            "progression": self.progression,
        }
        if self.health is not None:
            out["health"] = self.health
        if self.defense is not None:
            out["defense"] = self.defense
        if self.image_url:
            out["imageUrl"] = self.image_url
        return out


# Fallback ladder bounds.
FIRST_STAGE = 0
TERMINAL_STAGE = 4
DEFAULT_ICON_SIZE = 40


@dataclass(frozen=True)
class FallbackAttemptState:
    """Where one displayed image is on the fallback ladder.

    The caller owns the value: start with stage 0, then keep the state returned
    by `ImageResolver.next_fallback` until the image loads or `final` is set.
    """

    entity_name: str
    mod: Optional[str] = None
    stage: int = FIRST_STAGE
    final: bool = False
    size: int = DEFAULT_ICON_SIZE

    def clamped(self) -> "FallbackAttemptState":
        stage = min(max(int(self.stage), FIRST_STAGE), TERMINAL_STAGE)
        if stage == self.stage:
            return self
        return replace(self, stage=stage)

    def advanced(self) -> "FallbackAttemptState":
        cur = self.clamped()
        if cur.stage >= TERMINAL_STAGE:
            return cur.finished()
        return replace(cur, stage=cur.stage + 1)

    def finished(self) -> "FallbackAttemptState":
        if self.final and self.stage == TERMINAL_STAGE:
            return self
        return replace(self, stage=TERMINAL_STAGE, final=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entity_name": self.entity_name,
            "mod": self.mod,
            "stage": self.stage,
            "final": self.final,
            "size": self.size,
        }


@dataclass(frozen=True)
class LadderStep:
    """One rung of the fallback ladder as shown by the CLI / API."""

    stage: int
    url: str
    final: bool = False
