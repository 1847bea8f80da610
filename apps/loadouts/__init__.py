# -*- coding: utf-8 -*-
"""Loadout API: wiki image URLs, fallback steps and boss progression ranks.

Tables are read from data/bosses-<mod>.json; see `app.create_app`.
"""

from core.version import versions

__all__ = ["__version__"]
__version__ = versions()["project_version"]
