from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional

from .exceptions import DuplicateKeyError, EmptyAnchorError, ParentNotFoundError
from .link import Link

DEFAULT_WEIGHT = 50


@dataclass
class MenuItem:
    """排序后的菜单项

    由 MenuTree.build 生成的快照, 修改它不会影响菜单树本身
    """
    key: str
    link: Link
    weight: int = DEFAULT_WEIGHT
    children: Dict[str, 'MenuItem'] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.link.anchor

    @property
    def url(self) -> str:
        return self.link.href

    def to_dict(self) -> dict:
        """转换为字典，用于JSON序列化"""
        return {
            'item': {
                'key': self.key,
                'label': self.link.anchor,
                'url': self.link.href,
                'attributes': dict(self.link.attributes),
                'rels': list(self.link.rels),
                'rendered': self.link.render()
            },
            'children': {key: child.to_dict() for key, child in self.children.items()}
        }


@dataclass
class MenuEntry:
    """菜单树中保存的节点"""
    key: str
    link: Link
    weight: int = DEFAULT_WEIGHT
    parent_key: Optional[str] = None
    children: List[str] = field(default_factory=list)  # 子节点的键, 按插入顺序


class MenuTree:
    """一个菜单ID对应的菜单树

    节点按键平铺保存在 entries 中, 每个节点只记录子节点的键,
    因此任意层级的查找都是一次字典访问
    """

    def __init__(self, menu_id: str):
        self.menu_id = menu_id
        self.entries: Dict[str, MenuEntry] = {}
        self.roots: List[str] = []

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> Optional[MenuEntry]:
        return self.entries.get(key)

    def insert(
        self,
        key: str,
        link: Link,
        parent_key: Optional[str] = None,
        weight: int = DEFAULT_WEIGHT
    ) -> MenuEntry:
        """插入节点, 校验全部通过后才修改树"""
        if key in self.entries:
            raise DuplicateKeyError(key)
        if not link.anchor:
            raise EmptyAnchorError(key)
        if parent_key is not None and parent_key not in self.entries:
            raise ParentNotFoundError(key, parent_key)

        entry = MenuEntry(key=key, link=link, weight=weight, parent_key=parent_key)
        self.entries[key] = entry
        if parent_key is None:
            self.roots.append(key)
        else:
            self.entries[parent_key].children.append(key)
        return entry

    def remove(self, key: str) -> List[str]:
        """删除节点及其整棵子树, 返回被删除的键"""
        entry = self.entries.get(key)
        if entry is None:
            return []
        siblings = self.roots if entry.parent_key is None else self.entries[entry.parent_key].children
        siblings.remove(key)
        removed = list(self.walk(key))
        for removed_key in removed:
            del self.entries[removed_key]
        return removed

    def walk(self, key: Optional[str] = None) -> Iterator[str]:
        """深度优先遍历, key 为空时遍历整棵树"""
        stack = [key] if key is not None else list(reversed(self.roots))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.entries[current].children))

    def build(self) -> Dict[str, MenuItem]:
        return self._build_level(self.roots)

    def build_item(self, key: str) -> Optional[MenuItem]:
        entry = self.entries.get(key)
        if entry is None:
            return None
        return MenuItem(entry.key, entry.link, entry.weight, self._build_level(entry.children))

    def _build_level(self, keys: List[str]) -> Dict[str, MenuItem]:
        # sorted 是稳定排序, 权重相同时保持插入顺序
        entries = sorted((self.entries[key] for key in keys), key=lambda entry: entry.weight)
        return {
            entry.key: MenuItem(entry.key, entry.link, entry.weight, self._build_level(entry.children))
            for entry in entries
        }

    def copy(self) -> 'MenuTree':
        tree = MenuTree(self.menu_id)
        tree.entries = {
            key: replace(entry, children=list(entry.children))
            for key, entry in self.entries.items()
        }
        tree.roots = list(self.roots)
        return tree
