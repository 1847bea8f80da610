from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pytest

from core.terraria.models import Boss
from core.terraria.overrides import OverrideTables
from core.terraria.progression import ProgressionIndex

PROJECT_ROOT = Path(__file__).resolve().parents[1]
REPO_DATA_DIR = PROJECT_ROOT / "data"


FIXTURE_ROWS: Dict[str, List[dict]] = {
    "vanilla": [
        {"id": 1, "name": "King Slime", "mod": "vanilla", "progression": "pre-hardmode", "order": 1},
        {"id": 2, "name": "Eye of Cthulhu", "mod": "vanilla", "progression": "pre-hardmode", "order": 2},
        {"id": 3, "name": "The Eater of Worlds", "mod": "vanilla", "progression": "pre-hardmode", "order": 3},
        {"id": 18, "name": "Moon Lord", "mod": "vanilla", "progression": "hardmode", "order": 18},
    ],
    "calamity": [
        {"id": 100001, "name": "Desert Scourge", "mod": "calamity", "progression": "pre-hardmode", "order": 1},
        {"id": 100026, "name": "Supreme Witch, Calamitas", "mod": "calamity", "progression": "post-moonlord", "order": 26},
    ],
    "thorium": [
        {"id": 200001, "name": "The Grand Thunder Bird", "mod": "thorium", "progression": "pre-hardmode", "order": 1},
    ],
}


def write_tables(data_dir: Path, rows: Dict[str, List[dict]]) -> Path:
    data_dir.mkdir(parents=True, exist_ok=True)
    for mod, table in rows.items():
        (data_dir / f"bosses-{mod}.json").write_text(json.dumps(table), encoding="utf-8")
    return data_dir


@pytest.fixture
def boss_tables() -> Dict[str, List[Boss]]:
    return {
        mod: [Boss(**row) for row in rows]
        for mod, rows in FIXTURE_ROWS.items()
    }


@pytest.fixture
def index(boss_tables) -> ProgressionIndex:
    return ProgressionIndex.build(boss_tables)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return write_tables(tmp_path / "data", FIXTURE_ROWS)


@pytest.fixture
def empty_overrides() -> OverrideTables:
    return OverrideTables()
