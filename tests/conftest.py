"""
Shared pytest fixtures for robyn_menu tests.
"""

import os
import sys
import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from robyn_menu.core.menu import MenuManager
from robyn_menu.renderers.base import BaseMenuRenderer


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingRenderer(BaseMenuRenderer):
    """Renderer that records what it was asked to render."""
    default_options = {
        'menu_id': 'default',
        'label': ''
    }

    def __init__(self, options=None):
        super().__init__(options)
        self.calls = []

    def render(self, menu, options=None):
        resolved = self.resolve_options(options)
        self.calls.append((menu, resolved))
        return f"{resolved['menu_id']}:{','.join(menu)}#{len(self.calls)}"


@pytest.fixture
def manager():
    """Empty menu manager without renderer or cache."""
    return MenuManager()


@pytest.fixture
def site_manager():
    """Manager holding the navigation used across renderer tests."""
    menu = MenuManager()
    menu.add_item('home', 'Home', '/')
    menu.add_item('about', 'About', '/about')
    menu.add_item('services', 'Services', '/services', None, {'class': 'myclass'})
    menu.add_item('products', 'Products', '/products', None, {}, ['nofollow'])
    menu.add_item('solutions', 'Solutions', '/solutions', None, {}, [], 30)
    menu.add_item('contact', 'Contact', '/contact', 'about')
    menu.add_item('support', 'Support', '/support', 'services')
    return menu


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()
