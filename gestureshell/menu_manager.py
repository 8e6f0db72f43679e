#===============================================================================
#  Gesture_Shell | menu_manager.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-16
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  The menu graph: menus keyed by id, auto-linked menu insertion, and
#  load/save of the versioned XML shortcut document (with migration of the
#  pre-versioning flat format).
#
#  Notes
#  -----
#  - load/save never raise for parse, schema or I/O faults. They log and
#    return a result; load_menus() degrades to an empty graph.
#  - A fault anywhere in a document discards the whole load.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, List, Optional, Union

from PySide6.QtCore import QIODevice, QSaveFile

from .constants import (
    CURRENT_VERSION,
    LEGACY_VERSION,
    OPPOSITE_GESTURES,
    PRIMARY_SHORTCUTS_MENU,
)
from .defaults import BundledDefaults, DefaultMenuProvider
from .errors import LoadResult, MenuError, MenuParseError, SaveResult, SchemaViolation, ShellMenuError
from .models import Menu, MenuItem
from .registry import ApplicationRegistry
from .xml_items import menu_to_element, read_items, read_menu

log = logging.getLogger("gestureshell.menu_manager")

Source = Union[str, Path, bytes, BinaryIO]


def _parse_document(source: Source) -> ET.Element:
    """Parse a path, raw bytes or binary stream into the document root."""
    try:
        if isinstance(source, (bytes, bytearray)):
            return ET.fromstring(source)
        if isinstance(source, (str, Path)):
            with open(source, "rb") as f:
                return ET.parse(f).getroot()
        return ET.parse(source).getroot()
    except ET.ParseError as e:
        raise MenuParseError(f"Menu document is not well-formed: {e}") from e
    except (LookupError, ValueError) as e:
        # expat rejects unknown and multi-byte encodings named in the XML header
        raise MenuParseError(f"Menu document encoding is not supported: {e}") from e


def document_version(root: ET.Element) -> str:
    """Version number of a document; "0.0" when it predates versioning."""
    version_el = next(root.iter("version"), None)
    if version_el is None:
        return LEGACY_VERSION
    return version_el.get("number", LEGACY_VERSION)


def is_legacy(root: ET.Element) -> bool:
    return document_version(root).lower() == LEGACY_VERSION


class MenuManager:
    """A set of menus keyed by id, with editing and XML persistence."""

    def __init__(self):
        self._menus: Dict[str, Menu] = {}

    # --- read contract -------------------------------------------------------

    def get(self, menu_id: Optional[str]) -> Optional[Menu]:
        if menu_id is None:
            return None
        return self._menus.get(menu_id)

    def ids(self) -> List[str]:
        return list(self._menus)

    def __contains__(self, menu_id: object) -> bool:
        return menu_id in self._menus

    def __len__(self) -> int:
        return len(self._menus)

    def __iter__(self) -> Iterator[Menu]:
        return iter(list(self._menus.values()))

    def _register(self, menu: Menu) -> None:
        self._menus[menu.id] = menu

    # --- editing -------------------------------------------------------------

    def unique_id(self, menu_name: str) -> str:
        """`menu_name`, or `menu_name N` with the first free N >= 2."""
        menu_id = menu_name
        n = 1
        while menu_id in self._menus:
            n += 1
            menu_id = f"{menu_name} {n}"
        return menu_id

    def insert_menu(self, current_menu: Menu, gesture: int, menu_name: str) -> Optional[Menu]:
        """Insert a new menu next to `current_menu` at an edge gesture.

        The new menu links back to `current_menu` on the opposite edge. A menu
        that `current_menu` already reached through `gesture` is chained after
        the new one instead of being orphaned. Non-edge gestures are ignored.
        """
        opposite = OPPOSITE_GESTURES.get(gesture)
        if opposite is None:
            log.debug("insert_menu ignored: gesture %s has no opposite edge", gesture)
            return None

        displaced = None
        existing = current_menu.get(gesture)
        if existing is not None and existing.is_menu_link:
            displaced = self.get(existing.data)

        new_menu = Menu(menu_name, menu_id=self.unique_id(menu_name))
        self._register(new_menu)

        link = MenuItem.link(new_menu)
        current_menu.put(gesture, link)
        new_menu.put(opposite, MenuItem.link(current_menu))
        if displaced is not None:
            new_menu.put(gesture, MenuItem.link(displaced))
            displaced.put(opposite, link)

        log.info(
            "Inserted menu '%s' after '%s' (gesture %s)%s",
            new_menu.id, current_menu.id, int(gesture),
            f", before '{displaced.id}'" if displaced is not None else "",
        )
        return new_menu

    # --- persistence ---------------------------------------------------------

    def to_xml(self) -> str:
        """Serialize every menu to the current document format.

        Raises SchemaViolation when a name or value holds a character XML 1.0
        cannot represent.
        """
        root = ET.Element("shell")
        ET.SubElement(root, "version", {"number": CURRENT_VERSION})
        for menu in self._menus.values():
            root.append(menu_to_element(menu))
        ET.indent(root)
        return ET.tostring(root, encoding="unicode")

    def save(self, filename: Union[str, Path]) -> SaveResult:
        """Write the menus to `filename`.

        QSaveFile writes to a temporary file and only replaces the target on
        commit, so a failed save leaves the previous file untouched.
        """
        try:
            payload = self.to_xml().encode("utf-8")
            f = QSaveFile(str(filename))
            if not f.open(QIODevice.OpenModeFlag.WriteOnly):
                raise OSError(f"Cannot open {filename} for writing: {f.errorString()}")
            if f.write(payload) != len(payload):
                f.cancelWriting()
                raise OSError(f"Short write to {filename}: {f.errorString()}")
            if not f.commit():
                raise OSError(f"Cannot commit {filename}: {f.errorString()}")
        except (ShellMenuError, OSError) as e:
            error = MenuError.from_exception(e)
            log.error("Saving menus failed (%s): %s", error.kind.value, error.message)
            return SaveResult(ok=False, error=error)

        log.info("Saved %d menus to %s", len(self), filename)
        return SaveResult(ok=True)

    @classmethod
    def _from_root(
        cls,
        root: ET.Element,
        registry: Optional[ApplicationRegistry],
        defaults: DefaultMenuProvider,
        primary_menu: str,
    ) -> "MenuManager":
        manager = cls()

        if is_legacy(root):
            # New default skeleton, with the old flat shortcuts laid over one menu.
            log.info("Migrating legacy shortcut document into '%s'", primary_menu)
            with defaults.open_default_document() as stream:
                seed_root = _parse_document(stream)
            if is_legacy(seed_root):
                raise SchemaViolation("Default menu set must use the current format")
            manager = cls._from_root(seed_root, registry, defaults, primary_menu)

            target = manager.get(primary_menu)
            if target is None:
                target = Menu(primary_menu)
                manager._register(target)
            target.update(read_items(root.iter(), registry))
            return manager

        for menu_el in root.iter("menu"):
            # Without an explicit id the label is the key.
            manager._register(read_menu(menu_el, registry))
        return manager

    @classmethod
    def load_menus_result(
        cls,
        source: Source,
        registry: Optional[ApplicationRegistry] = None,
        defaults: Optional[DefaultMenuProvider] = None,
        primary_menu: str = PRIMARY_SHORTCUTS_MENU,
    ) -> LoadResult:
        """Load menus from a path, bytes or stream, reporting any fault."""
        try:
            root = _parse_document(source)
            manager = cls._from_root(root, registry, defaults or BundledDefaults(), primary_menu)
        except (ShellMenuError, OSError) as e:
            error = MenuError.from_exception(e)
            log.error("Loading menus failed (%s): %s", error.kind.value, error.message)
            return LoadResult(cls(), error)

        log.info("Loaded %d menus", len(manager))
        return LoadResult(manager)

    @classmethod
    def load_menus(
        cls,
        source: Source,
        registry: Optional[ApplicationRegistry] = None,
        defaults: Optional[DefaultMenuProvider] = None,
        primary_menu: str = PRIMARY_SHORTCUTS_MENU,
    ) -> "MenuManager":
        """Load menus; an unreadable or invalid document gives an empty set."""
        return cls.load_menus_result(source, registry, defaults, primary_menu).manager
