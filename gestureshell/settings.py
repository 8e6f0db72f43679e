#===============================================================================
#  Gesture_Shell | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Load/save of the shell settings file (menu file location, applications
#  folder, default menu set, migration target menu).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .constants import APP_FOLDER_NAME, MENU_FILE_NAME, PRIMARY_SHORTCUTS_MENU

log = logging.getLogger("gestureshell.settings")


def default_settings() -> Dict[str, Any]:
    return {
        "menu_file": MENU_FILE_NAME,          # relative to the settings folder
        "applications_dir": APP_FOLDER_NAME,  # relative to the settings folder
        "default_menus": "",                  # "" -> bundled default_shortcuts.xml
        "primary_menu": PRIMARY_SHORTCUTS_MENU,
    }


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or fall back to defaults)."""
    d = default_settings()
    if not settings_path.exists():
        return d
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable settings file %s: %s", settings_path, e)
        return d
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a JSON object", settings_path)
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk."""
    settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")


def resolve_path(settings_path: Path, value: str) -> Path:
    """Paths in the settings file are relative to the file's own folder."""
    p = Path(value)
    return p if p.is_absolute() else settings_path.parent / p
