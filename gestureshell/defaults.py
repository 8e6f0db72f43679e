#===============================================================================
#  Gesture_Shell | defaults.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-16
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Provider of the bundled default menu set used to seed legacy migrations.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union

from .constants import DEFAULT_MENUS_FILE


class DefaultMenuProvider(Protocol):
    def open_default_document(self) -> BinaryIO:
        ...


class BundledDefaults:
    """Opens default_shortcuts.xml shipped with the package (or an override file)."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_MENUS_FILE

    def open_default_document(self) -> BinaryIO:
        return open(self.path, "rb")
