#===============================================================================
#  Gesture_Shell  |  Menu maintenance command line
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-16
#
#  Summary
#  -------
#  Command-line front end for the gesture shell's menu file:
#    - show                          -> list menus and their gesture bindings
#    - insert <menu> <gesture> <name> -> chain a new menu at an edge gesture
#    - migrate <input> [--output F]   -> upgrade a legacy shortcut file
#
#  Folder Conventions
#  ------------------
#    ./shell_settings.json   -> optional settings (see gestureshell/settings.py)
#    ./shortcuts.xml         -> menu document
#    ./applications/         -> installed apps used to filter launch items
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QCommandLineOption, QCommandLineParser, QCoreApplication

from gestureshell.constants import APP_TITLE, OPPOSITE_GESTURES, SETTINGS_FILE_NAME, Gesture
from gestureshell.defaults import BundledDefaults
from gestureshell.logging_setup import configure_logging
from gestureshell.menu_manager import MenuManager
from gestureshell.registry import ApplicationsFolderRegistry
from gestureshell.settings import load_settings, resolve_path

log = logging.getLogger("gestureshell.main")


def parse_gesture(text: str) -> Optional[int]:
    """Accept a gesture name (EDGELEFT) or its integer code."""
    text = text.strip()
    if text.isdigit():
        return int(text)
    try:
        return Gesture[text.upper()]
    except KeyError:
        return None


def gesture_label(code: int) -> str:
    try:
        return Gesture(code).name
    except ValueError:
        return str(code)


def print_menus(manager: MenuManager) -> None:
    if not len(manager):
        print("(no menus)")
        return
    for menu in manager:
        print(f"[{menu.id}] {menu.name}")
        for gesture, item in menu.items():
            target = item.data or ""
            if item.app is not None:
                target = item.app.package_name or item.app.script_name
            print(f"    {gesture_label(gesture):<10} {item.action:<7} {item.label}  -> {target}")


def main(argv: Optional[List[str]] = None) -> int:
    app = QCoreApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(APP_TITLE)

    parser = QCommandLineParser()
    parser.setApplicationDescription("Inspect and edit gesture shell menus.")
    parser.addHelpOption()
    parser.addPositionalArgument("command", "show | insert <menu> <gesture> <name> | migrate <input>")

    settings_opt = QCommandLineOption(["s", "settings"], "Settings file.", "file", SETTINGS_FILE_NAME)
    menus_opt = QCommandLineOption(["m", "menus"], "Menu document (overrides settings).", "file")
    apps_opt = QCommandLineOption(["a", "apps"], "Applications folder (overrides settings).", "dir")
    output_opt = QCommandLineOption(["o", "output"], "Output file for migrate.", "file")
    verbose_opt = QCommandLineOption(["v", "verbose"], "Log debug output to the console.")
    for opt in (settings_opt, menus_opt, apps_opt, output_opt, verbose_opt):
        parser.addOption(opt)

    parser.process(app)
    args = parser.positionalArguments()

    settings_path = Path(parser.value(settings_opt)).absolute()
    log_file = configure_logging(settings_path.parent, parser.isSet(verbose_opt))
    settings = load_settings(settings_path)

    menu_file = Path(parser.value(menus_opt)) if parser.isSet(menus_opt) \
        else resolve_path(settings_path, settings["menu_file"])
    apps_dir = Path(parser.value(apps_opt)) if parser.isSet(apps_opt) \
        else resolve_path(settings_path, settings["applications_dir"])
    defaults = BundledDefaults(
        resolve_path(settings_path, settings["default_menus"]) if settings["default_menus"] else None
    )
    registry = ApplicationsFolderRegistry(apps_dir)
    primary_menu = settings["primary_menu"]

    if not args:
        parser.showHelp(1)

    command = args[0].lower()

    if command == "show":
        manager = MenuManager.load_menus(menu_file, registry, defaults, primary_menu)
        print_menus(manager)
        return 0

    if command == "insert":
        if len(args) != 4:
            print("usage: insert <menu-id> <gesture> <name>", file=sys.stderr)
            return 1
        menu_id, gesture_text, name = args[1:]
        gesture = parse_gesture(gesture_text)
        if gesture not in OPPOSITE_GESTURES:
            print("Menus can only be chained at EDGELEFT or EDGERIGHT.", file=sys.stderr)
            return 1

        result = MenuManager.load_menus_result(menu_file, registry, defaults, primary_menu)
        if not result.ok:
            print(f"Cannot load {menu_file}: {result.error.message}", file=sys.stderr)
            return 1
        manager = result.manager
        current = manager.get(menu_id)
        if current is None:
            print(f"No menu with id '{menu_id}'.", file=sys.stderr)
            return 1

        new_menu = manager.insert_menu(current, gesture, name)
        saved = manager.save(menu_file)
        if not saved.ok:
            print(f"Save failed: {saved.error.message} (see {log_file})", file=sys.stderr)
            return 1
        print(f"Added menu '{new_menu.id}'.")
        return 0

    if command == "migrate":
        if len(args) != 2:
            print("usage: migrate <input> [--output FILE]", file=sys.stderr)
            return 1
        result = MenuManager.load_menus_result(Path(args[1]), registry, defaults, primary_menu)
        if not result.ok:
            print(f"Cannot load {args[1]}: {result.error.message}", file=sys.stderr)
            return 1
        target = Path(parser.value(output_opt)) if parser.isSet(output_opt) else menu_file
        saved = result.manager.save(target)
        if not saved.ok:
            print(f"Save failed: {saved.error.message} (see {log_file})", file=sys.stderr)
            return 1
        print(f"Wrote {len(result.manager)} menus to {target}.")
        return 0

    print(f"Unknown command '{args[0]}'.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
