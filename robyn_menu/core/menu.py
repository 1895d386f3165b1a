import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .cache import BaseCache
from .exceptions import (
    KeyNotFoundError, MenuError, MenuIdNotFoundError, NoRendererConfiguredError,
    InvalidImportRecordError,
)
from .link import Link
from .options import CacheTtl, MenuManagerOptions
from .source import MenuSourceRecord
from .tree import DEFAULT_WEIGHT, MenuItem, MenuTree
from ..renderers.base import BaseMenuRenderer

logger = logging.getLogger(__name__)

DEFAULT_MENU_ID = 'default'

_MISSING = object()


class MenuManager:
    """菜单管理器

    管理多个以菜单ID区分的菜单树, 除导出外的所有操作都作用于当前菜单.
    修改类方法返回 self, 可以链式调用.

    :param renderer: 默认渲染器
    :param cache: 渲染结果缓存, 为空时不缓存
    :param options: 缓存前缀、有效期、URL替换变量等配置
    """

    def __init__(
        self,
        renderer: Optional[BaseMenuRenderer] = None,
        cache: Optional[BaseCache] = None,
        options: Optional[MenuManagerOptions] = None
    ):
        self.renderer = renderer
        self.cache = cache
        self.options = options or MenuManagerOptions()
        self.reset()

    # 菜单选择与生命周期

    def reset(self) -> 'MenuManager':
        """清空所有菜单, 只保留空的 default 菜单"""
        self.menus: Dict[str, MenuTree] = {DEFAULT_MENU_ID: MenuTree(DEFAULT_MENU_ID)}
        self.menu_source: Dict[str, Dict[str, MenuSourceRecord]] = {}
        self.current_id = DEFAULT_MENU_ID
        return self

    def set_current_id(self, menu_id: str) -> 'MenuManager':
        if menu_id not in self.menus:
            self.menus[menu_id] = MenuTree(menu_id)
        self.current_id = menu_id
        return self

    def get_current_id(self) -> str:
        return self.current_id

    def get_menu_ids(self) -> List[str]:
        return list(self.menus)

    @property
    def tree(self) -> MenuTree:
        """当前菜单树"""
        return self.menus[self.current_id]

    # 增删改查

    def add_item(
        self,
        key: str,
        label: str,
        url: str,
        parent_key: Optional[str] = None,
        attributes: Optional[Dict[str, Any]] = None,
        rels: Optional[Iterable[str]] = None,
        weight: int = DEFAULT_WEIGHT
    ) -> 'MenuManager':
        """添加菜单项, url 中的替换变量会被替换"""
        link = Link(
            href=self.options.replace_url(url),
            anchor=label,
            attributes=dict(attributes or {}),
            rels=tuple(rels or ())
        )
        return self.add_raw_item(key, link, parent_key, weight)

    def add_raw_item(
        self,
        key: str,
        link: Link,
        parent_key: Optional[str] = None,
        weight: int = DEFAULT_WEIGHT
    ) -> 'MenuManager':
        """用已有的 Link 对象添加菜单项"""
        self.tree.insert(key, link, parent_key, weight)
        self.menu_source.setdefault(self.current_id, {})[key] = MenuSourceRecord.from_link(link, parent_key, weight)
        logger.debug("菜单 %s 添加菜单项 %s (父菜单: %s)", self.current_id, key, parent_key)
        return self

    def has_item(self, key: str) -> bool:
        return key in self.tree

    def __contains__(self, key: str) -> bool:
        return self.has_item(key)

    def get_link(self, key: str) -> Optional[Link]:
        entry = self.tree.get(key)
        return entry.link if entry else None

    def get_item(self, key: str) -> Optional[MenuItem]:
        """获取菜单项及其排序后的子菜单"""
        return self.tree.build_item(key)

    def remove_item(self, key: str) -> 'MenuManager':
        """删除菜单项及其子菜单, 键不存在时什么也不做"""
        removed = self.tree.remove(key)
        source = self.menu_source.get(self.current_id, {})
        for removed_key in removed:
            source.pop(removed_key, None)
        if removed:
            logger.debug("菜单 %s 删除菜单项 %s", self.current_id, ', '.join(removed))
        return self

    def add_attribute(self, key: str, name: str, value: str) -> 'MenuManager':
        """给菜单项的链接追加属性, class/rel 会合并到已有值中"""
        entry = self.tree.get(key)
        if entry is None:
            raise KeyNotFoundError(key)
        entry.link = entry.link.with_added_attribute(name, value)
        return self

    def make_active(self, key: str) -> 'MenuManager':
        """标记为当前激活的菜单项"""
        return self.add_attribute(key, 'class', 'active')

    def build(self) -> Dict[str, MenuItem]:
        """返回按权重排序后的菜单树"""
        return self.tree.build()

    # 导入导出

    def import_source(
        self,
        source: Mapping[str, Mapping[str, Any]],
        menu_id: Optional[str] = None,
        url_replace: Optional[Mapping[str, str]] = None
    ) -> 'MenuManager':
        """从 {菜单ID: {菜单键: 记录}} 结构导入菜单

        先校验全部记录; 插入过程中出错时, 涉及到的菜单恢复到导入前的状态
        """
        if menu_id is not None:
            if menu_id not in source:
                raise MenuIdNotFoundError(menu_id)
            menu_ids = [menu_id]
        else:
            menu_ids = list(source)

        records = {current: self._validate_source(source[current]) for current in menu_ids}

        snapshot = self._snapshot(menu_ids)
        try:
            for current, items in records.items():
                self.set_current_id(current)
                for key, record in items:
                    link = Link(
                        href=self.options.replace_url(record.url, url_replace),
                        anchor=record.label,
                        attributes=record.attributes,
                        rels=tuple(record.rels)
                    )
                    self.add_raw_item(key, link, record.parent_key, record.weight)
        except MenuError:
            self._restore(snapshot)
            raise

        logger.debug("导入菜单 %s", ', '.join(menu_ids))
        return self

    def export_source(self, menu_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """导出菜单记录, 不指定菜单ID时导出全部"""
        if menu_id is not None:
            records = self.menu_source.get(menu_id)
            if not records:
                return None
            return {key: record.to_dict() for key, record in records.items()}
        return {
            current: {key: record.to_dict() for key, record in records.items()}
            for current, records in self.menu_source.items()
            if records
        }

    def _validate_source(self, items: Any) -> List[Tuple[str, MenuSourceRecord]]:
        if not isinstance(items, Mapping):
            raise InvalidImportRecordError(None, 'menu', "菜单必须是 {菜单键: 记录} 字典")
        return [(key, MenuSourceRecord.from_dict(key, data)) for key, data in items.items()]

    def _snapshot(self, menu_ids: Iterable[str]) -> dict:
        return {
            'current_id': self.current_id,
            'menus': {
                menu_id: (
                    self.menus[menu_id].copy() if menu_id in self.menus else None,
                    dict(self.menu_source[menu_id]) if menu_id in self.menu_source else None
                )
                for menu_id in menu_ids
            }
        }

    def _restore(self, snapshot: dict):
        for menu_id, (tree, source) in snapshot['menus'].items():
            if tree is None:
                self.menus.pop(menu_id, None)
            else:
                self.menus[menu_id] = tree
            if source is None:
                self.menu_source.pop(menu_id, None)
            else:
                self.menu_source[menu_id] = source
        self.current_id = snapshot['current_id']

    # 渲染

    def render(
        self,
        options: Optional[Dict[str, Any]] = None,
        renderer: Optional[BaseMenuRenderer] = None
    ) -> Any:
        """渲染当前菜单

        配置了缓存时, 缓存未过期前直接返回缓存结果, 即使菜单已被修改
        """
        render_engine = renderer or self.renderer
        if render_engine is None:
            raise NoRendererConfiguredError()

        cache_key = f"{self.options.cache_key_prefix}{self.current_id}"
        if self.cache is not None:
            # 只读一次缓存, 避免 has 和 get 之间恰好过期
            cached = self.cache.get(cache_key, _MISSING)
            if cached is not _MISSING:
                logger.debug("菜单缓存命中: %s", cache_key)
                return cached

        render_options = dict(options or {})
        render_options.setdefault('menu_id', self.current_id)
        result = render_engine.render(self.build(), render_options)

        if self.cache is not None:
            self.cache.set(cache_key, result, self.options.cache_ttl)
            logger.debug("菜单缓存写入: %s", cache_key)
        return result

    def get_renderer_options(self) -> Dict[str, Any]:
        if self.renderer is None:
            raise NoRendererConfiguredError()
        return self.renderer.get_options()

    # 配置

    def set_cache_key_prefix(self, prefix: str) -> 'MenuManager':
        self.options.set_cache_key_prefix(prefix)
        return self

    def set_cache_ttl(self, ttl: CacheTtl) -> 'MenuManager':
        self.options.set_cache_ttl(ttl)
        return self

    def set_url_replace_vars(self, search: str, replace: str) -> 'MenuManager':
        """之后添加的菜单项 url 中的 search 会被替换为 replace"""
        self.options.set_url_replace_var(search, replace)
        return self
