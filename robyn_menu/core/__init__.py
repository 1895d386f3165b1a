from .exceptions import (
    MenuError, DuplicateKeyError, EmptyAnchorError, ParentNotFoundError,
    KeyNotFoundError, InvalidImportRecordError, UnknownOptionError,
    OptionTypeMismatchError, NoRendererConfiguredError, MenuIdNotFoundError,
)
from .link import Link
from .tree import MenuItem, MenuTree, DEFAULT_WEIGHT
from .source import MenuSourceRecord
from .options import MenuManagerOptions
from .cache import BaseCache, MemoryCache
from .menu import MenuManager, DEFAULT_MENU_ID
from .site import MenuSite

__all__ = [
    'MenuManager',
    'MenuManagerOptions',
    'MenuSite',
    'MenuItem',
    'MenuTree',
    'MenuSourceRecord',
    'Link',
    'BaseCache',
    'MemoryCache',
    'DEFAULT_WEIGHT',
    'DEFAULT_MENU_ID',
    'MenuError',
    'DuplicateKeyError',
    'EmptyAnchorError',
    'ParentNotFoundError',
    'KeyNotFoundError',
    'InvalidImportRecordError',
    'UnknownOptionError',
    'OptionTypeMismatchError',
    'NoRendererConfiguredError',
    'MenuIdNotFoundError',
]
