from .core import MenuManager, MenuSite, Link, MemoryCache
from .renderers import (
    HtmlMenuRenderer, BootstrapMenuRenderer, ArrayMenuRenderer, JsonMenuRenderer
)

__version__ = '0.1.0'

__all__ = [
    'MenuManager',
    'MenuSite',
    'Link',
    'MemoryCache',
    'HtmlMenuRenderer',
    'BootstrapMenuRenderer',
    'ArrayMenuRenderer',
    'JsonMenuRenderer'
]
