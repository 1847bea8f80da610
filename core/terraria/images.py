# -*- coding: utf-8 -*-
"""Wiki image URLs for items and bosses.

URLs point at the wiki.gg image namespace of the matching wiki:

    vanilla   https://terraria.wiki.gg/images/<File_Name>.png
    calamity  https://calamitymod.wiki.gg/images/<File_Name>.png
    thorium   https://thoriummod.wiki.gg/images/<File_Name>.png

Mod wikis are not consistent about file names, so a failed load walks a
fixed ladder of alternative spellings before giving up with a letter tile:

    stage 0  StrippedName.png        (sprite naming, alphanumerics only)
    stage 1  Spaced_Name_(item).png  (disambiguated item page)
    stage 2  Spaced_Name.gif         (animated sprites)
    stage 3  spaced_name.png         (lowercase upload)
    stage 4  placeholder             (final)

Vanilla names go straight to the placeholder; its wiki is consistent.
"""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from core.terraria.models import (
    DEFAULT_ICON_SIZE,
    FIRST_STAGE,
    TERMINAL_STAGE,
    FallbackAttemptState,
    LadderStep,
    Mod,
    is_modded,
    parse_mod,
)
from core.terraria.overrides import OverrideTables, default_override_tables
from core.terraria.placeholder import placeholder

DEFAULT_BASE_PATHS: Dict[Mod, str] = {
    Mod.VANILLA: "https://terraria.wiki.gg/images/",
    Mod.CALAMITY: "https://calamitymod.wiki.gg/images/",
    Mod.THORIUM: "https://thoriummod.wiki.gg/images/",
}

SEPARATOR = "_"
ITEM_SUFFIX = "_(item)"

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def encode_name(name: str) -> str:
    """Percent-encode a wiki file name.

    Keeps `A-Z a-z 0-9 - _ . ~ ! * '`; parentheses, commas, `%` and the rest
    are encoded.
    """
    return quote(name, safe="!*'")


def spaced(name: str) -> str:
    return name.replace(" ", SEPARATOR)


class ImageResolver:
    """Build image URLs from names + override tables.

    Both the override tables and the base paths are fixed at construction.
    """

    def __init__(
        self,
        overrides: Optional[OverrideTables] = None,
        base_paths: Optional[Mapping[str, str]] = None,
    ):
        self.overrides = overrides if overrides is not None else default_override_tables()
        paths = dict(DEFAULT_BASE_PATHS)
        for mod, base in (base_paths or {}).items():
            m = parse_mod(mod)
            if m is not None and base:
                paths[m] = base if base.endswith("/") else base + "/"
        self._base_paths = paths

    @property
    def base_paths(self) -> Dict[str, str]:
        return {m.value: p for m, p in self._base_paths.items()}

    def base_path(self, mod: Optional[str] = None) -> str:
        m = parse_mod(mod)
        return self._base_paths[m if m is not None else Mod.VANILLA]

    # ----------------- primary URLs -----------------
    def resolve(self, name: Optional[str], mod: Optional[str] = None) -> str:
        """Image URL for an item. Explicit icon overrides win over `mod`."""
        key = str(name or "")
        icon = self.overrides.item_icons.get(key)
        if icon:
            return icon
        formatted = self.overrides.item_names.get(key) or spaced(key)
        return f"{self.base_path(mod)}{encode_name(formatted)}.png"

    def resolve_boss(self, name: Optional[str], mod: Optional[str] = None) -> str:
        """Image URL for a boss; commas are dropped from computed names."""
        key = str(name or "")
        icon = self.overrides.boss_icons.get(key)
        if icon:
            return icon
        formatted = self.overrides.boss_names.get(key) or spaced(key).replace(",", "")
        return f"{self.base_path(mod)}{encode_name(formatted)}.png"

    # ----------------- fallback ladder -----------------
    def next_fallback(self, state: FallbackAttemptState) -> Tuple[str, FallbackAttemptState]:
        """Next URL to try after the current one failed, plus the new state.

        Past the last stage this keeps returning the placeholder.
        """
        cur = state.clamped()
        if cur.final or cur.stage >= TERMINAL_STAGE or not is_modded(cur.mod):
            return placeholder(cur.entity_name, cur.size), cur.finished()

        name = str(cur.entity_name or "")
        base = self.base_path(cur.mod)
        if cur.stage == 0:
            url = f"{base}{encode_name(_NON_ALNUM_RE.sub('', name))}.png"
        elif cur.stage == 1:
            url = f"{base}{encode_name(spaced(name) + ITEM_SUFFIX)}.png"
        elif cur.stage == 2:
            url = f"{base}{encode_name(spaced(name))}.gif"
        else:
            url = f"{base}{encode_name(spaced(name).lower())}.png"
        return url, cur.advanced()

    def ladder(
        self,
        name: str,
        mod: Optional[str] = None,
        *,
        boss: bool = False,
        size: int = DEFAULT_ICON_SIZE,
    ) -> List[LadderStep]:
        """Every URL a display would try, in order (primary first)."""
        primary = self.resolve_boss(name, mod) if boss else self.resolve(name, mod)
        steps = [LadderStep(stage=FIRST_STAGE, url=primary)]
        state = FallbackAttemptState(entity_name=name, mod=mod, size=size)
        while not state.final:
            url, state = self.next_fallback(state)
            steps.append(LadderStep(stage=state.stage, url=url, final=state.final))
        return steps
