"""
Shared pytest fixtures for gesture shell tests.
"""

import io
import os
import sys

import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


CURRENT_DOC = b"""<shell>
  <version number="0.1" />
  <menu label="Home" id="home">
    <item gesture="10" label="Games" action="MENU" data="Games" />
    <item gesture="2" label="Mail" action="LAUNCH" data="inbox">
      <appInfo package="com.example.mail" class="com.example.mail.Main" />
      <param name="account" value="work" />
      <param name="folder" value="inbox" />
    </item>
    <item gesture="8" label="Old App" action="launch">
      <appInfo package="com.example.gone" />
    </item>
    <item gesture="5" label="Time" action="TIME" />
  </menu>
  <menu label="Games">
    <item gesture="11" label="Home" action="MENU" data="home" />
    <item gesture="4" label="Chess" action="ASE">
      <appInfo package="com.example.scripting" script="chess.py" />
    </item>
  </menu>
</shell>
"""

LEGACY_DOC = b"""<shell>
  <item gesture="1" label="Phone" action="LAUNCH">
    <appInfo package="com.example.phone" class="Dialer" />
  </item>
  <item gesture="2" label="Notes" action="LAUNCH">
    <appInfo package="com.example.notes" />
  </item>
</shell>
"""

DEFAULTS_DOC = b"""<shell>
  <version number="0.1" />
  <menu label="Home">
    <item gesture="10" label="Shortcuts Left" action="MENU" data="Shortcuts Left" />
  </menu>
  <menu label="Shortcuts Left">
    <item gesture="11" label="Home" action="MENU" data="Home" />
    <item gesture="2" label="Browser" action="LAUNCH">
      <appInfo package="com.example.browser" />
    </item>
    <item gesture="3" label="Clock" action="CLOCK" />
  </menu>
</shell>
"""


class BytesDefaults:
    """Default-menu provider serving an in-memory document."""

    def __init__(self, payload=DEFAULTS_DOC):
        self.payload = payload
        self.opened = 0

    def open_default_document(self):
        self.opened += 1
        return io.BytesIO(self.payload)


@pytest.fixture
def current_doc():
    return CURRENT_DOC


@pytest.fixture
def legacy_doc():
    return LEGACY_DOC


@pytest.fixture
def defaults():
    return BytesDefaults()


@pytest.fixture
def make_defaults():
    return BytesDefaults


@pytest.fixture
def registry():
    """Registry with everything from the sample documents installed except com.example.gone."""
    from gestureshell.registry import StaticRegistry

    return StaticRegistry([
        "com.example.mail",
        "com.example.scripting",
        "com.example.phone",
        "com.example.notes",
        "com.example.browser",
    ])


@pytest.fixture
def home_graph():
    """A graph holding a single empty 'Home' menu."""
    from gestureshell.menu_manager import MenuManager

    return MenuManager.load_menus(
        b'<shell><version number="0.1"/><menu label="Home"/></shell>'
    )
