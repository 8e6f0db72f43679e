#===============================================================================
#  Gesture_Shell | xml_items.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-16
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Conversion between <item>/<menu> XML elements and MenuItem/Menu objects.
#  Shared by the current-format and legacy load paths.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, Iterable, List, Optional, Tuple

from .constants import LAUNCH_ACTIONS
from .errors import SchemaViolation
from .models import AppEntry, Menu, MenuItem
from .registry import ApplicationRegistry

log = logging.getLogger("gestureshell.xml_items")

# Characters outside the XML 1.0 Char production; ElementTree writes them unescaped.
INVALID_XML_CHARS_RE = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _tag(el: ET.Element) -> str:
    return el.tag.lower() if isinstance(el.tag, str) else ""


def _required(el: ET.Element, name: str) -> str:
    value = el.get(name)
    if value is None:
        raise SchemaViolation(f"<{el.tag}> is missing required attribute '{name}'")
    return value


def read_app_entry(item_el: ET.Element) -> AppEntry:
    """Build the AppEntry of a launch item from its <appInfo> and <param> children."""
    app_info: Optional[ET.Element] = None
    params: List[Tuple[str, str]] = []
    for child in item_el:
        tag = _tag(child)
        if tag == "appinfo":
            app_info = child
        elif tag == "param":
            params.append((_required(child, "name"), _required(child, "value")))

    if app_info is None:
        raise SchemaViolation(
            f"Launch item '{item_el.get('label', '')}' has no <appInfo> element"
        )

    return AppEntry(
        package_name=app_info.get("package", ""),
        class_name=app_info.get("class", ""),
        script_name=app_info.get("script", ""),
        params=tuple(params),
    )


def read_items(
    elements: Iterable[ET.Element],
    registry: Optional[ApplicationRegistry] = None,
) -> Dict[int, MenuItem]:
    """Read <item> elements into a gesture -> MenuItem mapping.

    Non-item elements are skipped. Launch items whose package the registry
    does not know are dropped.
    """
    items: Dict[int, MenuItem] = {}
    for el in elements:
        if _tag(el) != "item":
            continue

        raw_gesture = _required(el, "gesture")
        try:
            gesture = int(raw_gesture.strip())
        except ValueError:
            raise SchemaViolation(f"Gesture '{raw_gesture}' is not an integer") from None

        label = _required(el, "label")
        action = _required(el, "action")
        data = el.get("data")

        if action.lower() not in LAUNCH_ACTIONS:
            items[gesture] = MenuItem(label=label, action=action, data=data)
            continue

        app = read_app_entry(el)
        if registry is not None and not registry.exists(app.package_name):
            log.debug("Dropping '%s': package '%s' is not installed", label, app.package_name)
            continue
        items[gesture] = MenuItem(label=label, action=action, data=data, app=app)

    return items


def read_menu(menu_el: ET.Element, registry: Optional[ApplicationRegistry] = None) -> Menu:
    label = _required(menu_el, "label")
    return Menu(label, read_items(menu_el, registry), menu_id=menu_el.get("id"))


def _element(tag: str, attrib: Dict[str, str], parent: Optional[ET.Element] = None) -> ET.Element:
    for name, value in attrib.items():
        bad = INVALID_XML_CHARS_RE.search(value)
        if bad:
            raise SchemaViolation(
                f"<{tag} {name}={value!r}> contains character U+{ord(bad.group()):04X} not allowed in XML"
            )
    if parent is None:
        return ET.Element(tag, attrib)
    return ET.SubElement(parent, tag, attrib)


def item_to_element(gesture: int, item: MenuItem) -> ET.Element:
    attrib = {
        "gesture": str(int(gesture)),
        "label": item.label,
        "action": item.action,
    }
    if item.data is not None:
        attrib["data"] = item.data
    el = _element("item", attrib)
    if item.app is not None:
        _element("appInfo", {
            "package": item.app.package_name,
            "class": item.app.class_name,
            "script": item.app.script_name,
        }, el)
        for name, value in item.app.params:
            _element("param", {"name": name, "value": value}, el)
    return el


def menu_to_element(menu: Menu) -> ET.Element:
    el = _element("menu", {"label": menu.name, "id": menu.id})
    for gesture, item in menu.items():
        el.append(item_to_element(gesture, item))
    return el
