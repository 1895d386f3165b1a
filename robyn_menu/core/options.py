from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Union

CacheTtl = Optional[Union[int, float, timedelta]]


class MenuManagerOptions:
    """MenuManager配置选项"""
    def __init__(
        self,
        cache_key_prefix: str = 'menu_',
        cache_ttl: CacheTtl = None,
        url_replace_vars: Optional[Dict[str, str]] = None
    ):
        self.cache_key_prefix = cache_key_prefix
        self.cache_ttl = cache_ttl
        self.url_replace_vars: Dict[str, str] = dict(url_replace_vars or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'MenuManagerOptions':
        """从配置字典创建"""
        unknown = set(data) - {'cache_key_prefix', 'cache_ttl', 'url_replace_vars'}
        if unknown:
            raise ValueError(f"未知的配置项: {', '.join(sorted(unknown))}")
        return cls(**data)

    def set_cache_key_prefix(self, prefix: str):
        """设置缓存键前缀"""
        self.cache_key_prefix = prefix

    def set_cache_ttl(self, ttl: CacheTtl):
        """设置缓存有效期"""
        self.cache_ttl = ttl

    def set_url_replace_var(self, search: str, replace: str):
        """设置URL替换变量, 例如 {url} -> https://example.com"""
        self.url_replace_vars[search] = replace

    def replace_url(self, url: str, extra: Optional[Mapping[str, str]] = None) -> str:
        """先应用 extra 中的替换, 再应用全局替换变量"""
        for replacements in (extra or {}, self.url_replace_vars):
            for search, replace in replacements.items():
                url = url.replace(search, replace)
        return url
