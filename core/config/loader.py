import configparser
import os
from pathlib import Path
from typing import Dict, Optional

# Section / key defaults used when conf/settings.ini is absent or incomplete.
DEFAULTS = {
    "PATHS": {
        "DATA_DIR": "data",
        "OVERRIDES": "data/image_overrides.json",
    },
    "IMAGES": {
        "VANILLA_BASE": "https://terraria.wiki.gg/images/",
        "CALAMITY_BASE": "https://calamitymod.wiki.gg/images/",
        "THORIUM_BASE": "https://thoriummod.wiki.gg/images/",
    },
    "PROGRESSION": {
        "SENTINEL_RANK": "999",
    },
}


class ConfigLoader:
    def __init__(self, config_path: Optional[Path] = None):
        # 自动定位项目根目录 (core/config/*)
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else self.project_root / "conf" / "settings.ini"

        self.config = configparser.ConfigParser()
        self.config.read_dict(DEFAULTS)
        # settings.ini is optional; built-in defaults cover every key
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def get(self, section, key, fallback=None):
        """获取配置值并自动展开用户路径 (~)"""
        val = self.config.get(section, key, fallback=fallback)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def path(self, section, key) -> Optional[Path]:
        """Config value as a path; relative paths are anchored at the project root."""
        val = (self.get(section, key) or "").strip()
        if not val:
            return None
        p = Path(val)
        return p if p.is_absolute() else self.project_root / p

    def data_dir(self) -> Path:
        env = os.environ.get("LOADOUT_DATA_DIR", "").strip()
        if env:
            return Path(env).expanduser().resolve()
        return self.path("PATHS", "DATA_DIR") or (self.project_root / "data")

    def overrides_path(self) -> Optional[Path]:
        return self.path("PATHS", "OVERRIDES")

    def base_paths(self) -> Dict[str, str]:
        return {
            "vanilla": self.get("IMAGES", "VANILLA_BASE"),
            "calamity": self.get("IMAGES", "CALAMITY_BASE"),
            "thorium": self.get("IMAGES", "THORIUM_BASE"),
        }

    def sentinel_rank(self) -> int:
        try:
            return self.config.getint("PROGRESSION", "SENTINEL_RANK")
        except ValueError:
            return int(DEFAULTS["PROGRESSION"]["SENTINEL_RANK"])


# 单例模式：直接导出的实例
loadout_config = ConfigLoader()

# === 测试代码 ===
if __name__ == "__main__":
    print(f"Project Root: {loadout_config.project_root}")
    print(f"Data Dir: {loadout_config.data_dir()}")
