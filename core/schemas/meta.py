#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Header block for exported index files.

`sources` records a short sha1 of every input file so a consumer can tell
when an export is stale relative to data/.
"""

from __future__ import annotations

import hashlib
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from core.version import versions


def now_iso() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


def file_digest(path: Path, length: int = 12) -> Optional[str]:
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    return hashlib.sha1(data).hexdigest()[:length]


def describe_sources(paths: Iterable[Path]) -> Dict[str, Dict[str, Any]]:
    return {p.name: {"sha1": file_digest(p)} for p in map(Path, paths)}


def build_meta(
    *,
    schema: int,
    tool: str,
    sources: Optional[Iterable[Path]] = None,
    counts: Optional[Mapping[str, int]] = None,
) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"schema": int(schema), "tool": str(tool), "generated": now_iso()}
    meta.update(versions())
    if sources is not None:
        meta["sources"] = describe_sources(sources)
    if counts:
        meta["counts"] = {str(k): int(v) for k, v in counts.items()}
    return meta
