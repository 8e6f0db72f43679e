#===============================================================================
#  Gesture_Shell | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Central place for gesture codes, action names, document versions and
#  file/folder naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

APP_TITLE = "Gesture Shell"
APP_FOLDER_NAME = "applications"
MENU_FILE_NAME = "shortcuts.xml"
SETTINGS_FILE_NAME = "shell_settings.json"
LOG_DIR_NAME = ".gestureshell"

RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_MENUS_FILE = RESOURCES_DIR / "default_shortcuts.xml"


class Gesture(IntEnum):
    """Gesture codes produced by the gesture overlay."""
    UPLEFT = 1
    UP = 2
    UPRIGHT = 3
    LEFT = 4
    CENTER = 5
    RIGHT = 6
    DOWNLEFT = 7
    DOWN = 8
    DOWNRIGHT = 9
    EDGELEFT = 10
    EDGERIGHT = 11
    EDGEUP = 12
    EDGEDOWN = 13


# Only edge swipes chain menus together.
OPPOSITE_GESTURES = {
    Gesture.EDGELEFT: Gesture.EDGERIGHT,
    Gesture.EDGERIGHT: Gesture.EDGELEFT,
}

# --- Actions ---
ACTION_MENU = "MENU"
ACTION_LAUNCH = "LAUNCH"
ACTION_ASE = "ASE"
LAUNCH_ACTIONS = {"launch", "ase"}  # compared lower-cased

# --- Document format ---
CURRENT_VERSION = "0.1"
LEGACY_VERSION = "0.0"

# Legacy shortcut files are merged into this menu of the default set.
PRIMARY_SHORTCUTS_MENU = "Shortcuts Left"
