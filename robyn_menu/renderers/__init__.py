from .base import BaseMenuRenderer
from .html import HtmlMenuRenderer, BootstrapMenuRenderer
from .data import ArrayMenuRenderer, JsonMenuRenderer

__all__ = [
    'BaseMenuRenderer',
    'HtmlMenuRenderer',
    'BootstrapMenuRenderer',
    'ArrayMenuRenderer',
    'JsonMenuRenderer'
]
