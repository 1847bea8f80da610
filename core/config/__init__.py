from core.config.loader import ConfigLoader, loadout_config

__all__ = ["ConfigLoader", "loadout_config"]
