#===============================================================================
#  Gesture_Shell | registry.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Installed-application registries consulted while loading menus.
#  A registry only answers "is this package installed?".
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Set, runtime_checkable


@runtime_checkable
class ApplicationRegistry(Protocol):
    def exists(self, package_name: str) -> bool:
        ...


class StaticRegistry:
    """Registry backed by a fixed set of package names."""

    def __init__(self, package_names: Iterable[str] = ()):
        self._names: Set[str] = set(package_names)

    def exists(self, package_name: str) -> bool:
        return package_name in self._names


def find_python_main(folder: Path) -> Optional[Path]:
    """Find a launchable python entrypoint within *one* folder level.

    Same rules the launcher uses to show a Python folder as a tile, so a
    folder counts as installed here exactly when the launcher can start it.

    Rules:
    - Prefer ./main.py
    - Otherwise use the first file matching main*.py at the top level
    - Do not recurse into subfolders
    """
    if not folder.is_dir():
        return None

    main_py = folder / "main.py"
    if main_py.is_file():
        return main_py

    candidates = sorted(
        p for p in folder.iterdir()
        if p.is_file()
        and p.suffix.lower() == ".py"
        and p.name.lower().startswith("main")
    )
    return candidates[0] if candidates else None


def scan_installed_names(apps_dir: Path) -> List[str]:
    """Names of the launchable entries under the applications folder.

    Supports:
      - .exe / .lnk / .url files (name = file stem)
      - Python app folders with a top-level main*.py (name = folder name)
    """
    if not apps_dir.is_dir():
        return []

    names: List[str] = []
    for item in sorted(apps_dir.iterdir(), key=lambda p: p.name.lower()):
        if item.is_file() and item.suffix.lower() in (".exe", ".lnk", ".url"):
            names.append(item.stem)
        elif item.is_dir() and find_python_main(item):
            names.append(item.name)
    return names


class ApplicationsFolderRegistry:
    """Registry backed by the launcher's ./applications folder.

    The folder is scanned once, on first lookup, so a single menu load sees
    a consistent view.
    """

    def __init__(self, apps_dir: Path):
        self.apps_dir = Path(apps_dir)
        self._names: Optional[Set[str]] = None

    def refresh(self) -> None:
        self._names = {n.lower() for n in scan_installed_names(self.apps_dir)}

    def exists(self, package_name: str) -> bool:
        if self._names is None:
            self.refresh()
        return package_name.lower() in self._names
