# -*- coding: utf-8 -*-
"""Image override tables.

Two kinds of exceptions exist for wiki image names:
  - *icons*: the computed URL is wrong, use this URL verbatim
  - *names*: the wiki file uses another spelling, format this name instead

Tables are plain read-only mappings built once and injected into
`ImageResolver`, so tests can pass their own fixtures.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_SECTIONS = ("item_icons", "item_names", "boss_icons", "boss_names")


def _frozen(d: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    return MappingProxyType(dict(d or {}))


@dataclass(frozen=True)
class OverrideTables:
    item_icons: Mapping[str, str] = field(default_factory=_frozen)
    item_names: Mapping[str, str] = field(default_factory=_frozen)
    boss_icons: Mapping[str, str] = field(default_factory=_frozen)
    boss_names: Mapping[str, str] = field(default_factory=_frozen)

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "OverrideTables":
        sections: Dict[str, Mapping[str, str]] = {}
        for key in _SECTIONS:
            sections[key] = _frozen(_clean_section(key, doc.get(key)))
        return cls(**sections)

    def merged(self, other: "OverrideTables") -> "OverrideTables":
        """Return a copy where entries of `other` win."""
        sections: Dict[str, Mapping[str, str]] = {}
        for key in _SECTIONS:
            cur = dict(getattr(self, key))
            cur.update(getattr(other, key))
            sections[key] = _frozen(cur)
        return OverrideTables(**sections)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {key: dict(getattr(self, key)) for key in _SECTIONS}

    def counts(self) -> Dict[str, int]:
        return {key: len(getattr(self, key)) for key in _SECTIONS}


def _clean_section(name: str, raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("override section %s is not an object, ignored", name)
        return {}
    out: Dict[str, str] = {}
    for k, v in raw.items():
        if not isinstance(k, str) or not isinstance(v, str) or not k or not v:
            logger.warning("override %s[%r] skipped (expected non-empty strings)", name, k)
            continue
        out[k] = v
    return out


# Known wiki quirks. Map icons read better than the full boss sprites.
_DEFAULT_DOC: Dict[str, Dict[str, str]] = {
    "item_icons": {},
    "item_names": {
        "Enchanted Sword": "Enchanted_Sword_(item)",
        "Fabstaff": "Sylvestaff",
    },
    "boss_icons": {
        "The Hive Mind": "https://calamitymod.wiki.gg/images/Hive_Mind_map.png",
        "Leviathan and Anahita": "https://calamitymod.wiki.gg/images/Anahita_map.png",
        "Providence, the Profaned Goddess": "https://calamitymod.wiki.gg/images/Providence_map.png",
        "Signus, Envoy of the Devourer": "https://calamitymod.wiki.gg/images/Signus_map.png",
        "Yharon, Dragon of Rebirth": "https://calamitymod.wiki.gg/images/Yharon_map.png",
        "Supreme Witch, Calamitas": "https://calamitymod.wiki.gg/images/Calamitas_map.png",
    },
    "boss_names": {
        "Lich": "Lich_(Map_icon)",
    },
}


def default_override_tables() -> OverrideTables:
    return OverrideTables.from_dict(_DEFAULT_DOC)


def load_override_tables(path: Optional[Path], base: Optional[OverrideTables] = None) -> OverrideTables:
    """Load override JSON from `path` on top of `base` (defaults when None).

    A missing or unreadable file leaves `base` unchanged.
    """
    tables = base if base is not None else default_override_tables()
    if path is None:
        return tables
    p = Path(path)
    if not p.exists():
        logger.info("override file not found: %s (using built-in tables)", p)
        return tables
    try:
        doc = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("override file unreadable: %s (%s)", p, e)
        return tables
    if not isinstance(doc, dict):
        logger.warning("override file must hold an object: %s", p)
        return tables
    return tables.merged(OverrideTables.from_dict(doc))
