#===============================================================================
#  Gesture_Shell | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Shared data models: launch targets, gesture-bound menu items and menus.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .constants import ACTION_MENU, LAUNCH_ACTIONS


@dataclass(frozen=True)
class AppEntry:
    """Represents a launchable application or script bound to a gesture."""
    package_name: str = ""
    class_name: str = ""
    script_name: str = ""
    params: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)  # (name, value) in order


@dataclass(frozen=True)
class MenuItem:
    """The action bound to one gesture within one menu."""
    label: str
    action: str               # "MENU" | "LAUNCH" | "ASE" | any other tag
    data: Optional[str] = None  # target menu id for MENU items
    app: Optional[AppEntry] = None

    def __post_init__(self) -> None:
        if self.app is not None and not self.is_launch:
            raise ValueError(f"Action {self.action!r} cannot carry an application")

    @property
    def is_launch(self) -> bool:
        return self.action.lower() in LAUNCH_ACTIONS

    @property
    def is_menu_link(self) -> bool:
        return self.action.lower() == ACTION_MENU.lower()

    @classmethod
    def link(cls, menu: "Menu") -> "MenuItem":
        """A MENU item that opens `menu`."""
        return cls(label=menu.name, action=ACTION_MENU, data=menu.id)


class Menu:
    """A named node of the menu graph holding at most one item per gesture."""

    def __init__(
        self,
        name: str,
        items: Optional[Mapping[int, MenuItem]] = None,
        menu_id: Optional[str] = None,
    ):
        self.name = name
        self.id = menu_id if menu_id is not None else name
        self._items: Dict[int, MenuItem] = dict(items or {})

    def get(self, gesture: int) -> Optional[MenuItem]:
        return self._items.get(gesture)

    def put(self, gesture: int, item: MenuItem) -> None:
        self._items[gesture] = item

    def update(self, items: Mapping[int, MenuItem]) -> None:
        for gesture, item in items.items():
            self.put(gesture, item)

    def gestures(self) -> List[int]:
        return list(self._items)

    def items(self) -> Iterable[Tuple[int, MenuItem]]:
        return list(self._items.items())

    def __contains__(self, gesture: object) -> bool:
        return gesture in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Menu(id={self.id!r}, name={self.name!r}, items={len(self._items)})"
