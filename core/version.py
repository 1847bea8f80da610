# -*- coding: utf-8 -*-
"""Project / index versions from conf/version.json."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

VERSION_FILE = Path(__file__).resolve().parents[1] / "conf" / "version.json"


@dataclass(frozen=True)
class VersionInfo:
    project_version: str = "unknown"
    # exported index format; tracks the project version unless pinned
    index_version: str = ""

    def as_dict(self) -> Dict[str, str]:
        out = asdict(self)
        out["index_version"] = self.index_version or self.project_version
        return out


@lru_cache(maxsize=1)
def version_info() -> VersionInfo:
    try:
        raw = json.loads(VERSION_FILE.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return VersionInfo()
    except (OSError, ValueError) as e:
        logger.warning("version file unreadable: %s (%s)", VERSION_FILE, e)
        return VersionInfo()
    if not isinstance(raw, dict):
        return VersionInfo()
    project = str(raw.get("project_version") or "").strip() or "unknown"
    return VersionInfo(project, str(raw.get("index_version") or "").strip())


def versions() -> Dict[str, str]:
    return version_info().as_dict()
