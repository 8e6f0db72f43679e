"""Tests for gestureshell/models.py - AppEntry, MenuItem and Menu."""

import dataclasses

import pytest

from gestureshell.constants import Gesture
from gestureshell.models import AppEntry, Menu, MenuItem


class TestAppEntry:
    """Test the immutable launch descriptor."""

    def test_defaults_are_empty(self):
        app = AppEntry()
        assert app.package_name == ""
        assert app.class_name == ""
        assert app.script_name == ""
        assert app.params == ()

    def test_equality_is_by_fields(self):
        a = AppEntry("com.example.mail", "Main", "", (("account", "work"),))
        b = AppEntry("com.example.mail", "Main", "", (("account", "work"),))
        assert a == b

    def test_is_immutable(self):
        app = AppEntry("com.example.mail")
        with pytest.raises(dataclasses.FrozenInstanceError):
            app.package_name = "other"


class TestMenuItem:
    """Test MenuItem action helpers and invariants."""

    def test_launch_actions_case_insensitive(self):
        assert MenuItem("a", "LAUNCH").is_launch
        assert MenuItem("a", "launch").is_launch
        assert MenuItem("a", "Ase").is_launch
        assert not MenuItem("a", "MENU").is_launch
        assert not MenuItem("a", "CLOCK").is_launch

    def test_menu_link_detection(self):
        assert MenuItem("a", "menu", "x").is_menu_link
        assert not MenuItem("a", "LAUNCH").is_menu_link

    def test_app_only_on_launch_items(self):
        with pytest.raises(ValueError):
            MenuItem("Games", "MENU", "Games", app=AppEntry("com.example.games"))

    def test_launch_item_keeps_app(self):
        app = AppEntry("com.example.games")
        item = MenuItem("Games", "LAUNCH", app=app)
        assert item.app is app
        assert item.data is None

    def test_link_uses_menu_name_and_id(self):
        menu = Menu("Games", menu_id="Games 2")
        link = MenuItem.link(menu)
        assert link == MenuItem("Games", "MENU", "Games 2")


class TestMenu:
    """Test the per-gesture item mapping."""

    def test_id_defaults_to_name(self):
        assert Menu("Home").id == "Home"

    def test_explicit_id(self):
        menu = Menu("Home", menu_id="home-1")
        assert menu.id == "home-1"
        assert menu.name == "Home"

    def test_one_item_per_gesture(self):
        menu = Menu("Home")
        menu.put(Gesture.UP, MenuItem("First", "CLOCK"))
        menu.put(Gesture.UP, MenuItem("Second", "CLOCK"))
        assert len(menu) == 1
        assert menu.get(Gesture.UP).label == "Second"

    def test_gesture_lookup_accepts_plain_int(self):
        menu = Menu("Home", {10: MenuItem("Left", "MENU", "Left")})
        assert menu.get(Gesture.EDGELEFT).label == "Left"
        assert Gesture.EDGELEFT in menu
        assert menu.get(Gesture.EDGERIGHT) is None

    def test_update_overwrites_and_keeps_order(self):
        menu = Menu("Home", {1: MenuItem("a", "X"), 2: MenuItem("b", "X")})
        menu.update({2: MenuItem("B", "X"), 3: MenuItem("c", "X")})
        assert menu.gestures() == [1, 2, 3]
        assert menu.get(2).label == "B"

    def test_constructor_copies_mapping(self):
        source = {1: MenuItem("a", "X")}
        menu = Menu("Home", source)
        source[2] = MenuItem("b", "X")
        assert len(menu) == 1
