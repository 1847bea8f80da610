#!/usr/bin/env python3
"""Loadout Lab tool registry."""

TOOLS = [
    # --- CLI tools (apps/cli/commands) ---
    {
        "file": "dash.py",
        "alias": "dash",
        "desc": "Overview: versions, data tables, tools",
        "usage": "loadout dash",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "doctor.py",
        "alias": "doctor",
        "desc": "Config and data table health check",
        "usage": "loadout doctor [--enforce] [--strict]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "bosses.py",
        "alias": "bosses",
        "desc": "Boss progression order across mods",
        "usage": "loadout bosses [--mod calamity] [--stage hardmode]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "rank.py",
        "alias": "rank",
        "desc": "Progression rank of a boss name (fuzzy)",
        "usage": "loadout rank <boss name> [<boss name> ...]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "icon.py",
        "alias": "icon",
        "desc": "Wiki image URL + fallback ladder for an item/boss",
        "usage": "loadout icon <name> [--mod thorium] [--boss] [--size 40]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },

    # --- dev tools (devtools/) ---
    {
        "file": "build_progression_index.py",
        "alias": "progression-index",
        "desc": "Export the progression index JSON",
        "usage": "loadout progression-index [--data-dir PATH] [--out PATH]",
        "type": "Dev",
        "folder": "devtools"
    },
    {
        "file": "serve_loadouts.py",
        "alias": "web",
        "desc": "Start the loadout API (FastAPI + Uvicorn)",
        "usage": "loadout web [--host 0.0.0.0 --port 20000]",
        "type": "Dev",
        "folder": "devtools"
    },
]


def get_tools():
    return TOOLS
