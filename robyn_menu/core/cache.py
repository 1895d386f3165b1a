import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Tuple

from .options import CacheTtl


class BaseCache(ABC):
    """菜单缓存基类"""

    @abstractmethod
    def has(self, key: str) -> bool:
        pass

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: CacheTtl = None):
        pass


class MemoryCache(BaseCache):
    """进程内缓存, ttl 为空时永不过期"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._items: Dict[str, Tuple[Any, Optional[float]]] = {}

    def _lookup(self, key: str) -> Optional[Tuple[Any, Optional[float]]]:
        """返回未过期的缓存项, 过期项会被删除"""
        item = self._items.get(key)
        if item is None:
            return None
        expires_at = item[1]
        if expires_at is not None and expires_at <= self._clock():
            del self._items[key]
            return None
        return item

    def has(self, key: str) -> bool:
        return self._lookup(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        item = self._lookup(key)
        return default if item is None else item[0]

    def set(self, key: str, value: Any, ttl: CacheTtl = None):
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        if ttl is not None and ttl <= 0:
            # 非正数的有效期等同于删除
            self.delete(key)
            return
        expires_at = None if ttl is None else self._clock() + ttl
        self._items[key] = (value, expires_at)

    def delete(self, key: str):
        self._items.pop(key, None)

    def clear(self):
        self._items.clear()
