from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from markupsafe import escape

# 这些属性的值是以空格分隔的标记, 合并时追加而不是覆盖
TOKEN_ATTRIBUTES = ('class', 'rel')


def split_tokens(value: Union[str, Iterable[str], None]) -> List[str]:
    """把属性值拆成标记列表"""
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    tokens = []
    for item in value:
        tokens.extend(str(item).split())
    return tokens


def merge_tokens(*values: Union[str, Iterable[str], None]) -> List[str]:
    """按出现顺序合并标记并去重"""
    merged: List[str] = []
    for value in values:
        for token in split_tokens(value):
            if token not in merged:
                merged.append(token)
    return merged


def merge_attributes(old: Mapping[str, Any], new: Mapping[str, Any]) -> Dict[str, Any]:
    """合并两组属性, class/rel 取并集, 其他属性以 new 为准"""
    merged = dict(old)
    for name, value in new.items():
        if name in TOKEN_ATTRIBUTES and name in merged:
            merged[name] = ' '.join(merge_tokens(merged[name], value))
        else:
            merged[name] = value
    return merged


@dataclass(frozen=True)
class Link:
    """菜单链接

    不可变对象, 修改属性时返回新的实例.
    attributes 是字典, 因此 Link 按值比较但不可哈希.
    """
    href: str
    anchor: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    rels: Tuple[str, ...] = ()

    __hash__ = None

    def __post_init__(self):
        attributes = dict(self.attributes or {})
        rels = merge_tokens(self.rels, attributes.pop('rel', None))
        object.__setattr__(self, 'attributes', attributes)
        object.__setattr__(self, 'rels', tuple(rels))

    def get_attribute(self, name: str, default: Optional[Any] = None) -> Any:
        if name == 'rel':
            return ' '.join(self.rels) if self.rels else default
        return self.attributes.get(name, default)

    def with_added_attribute(self, name: str, value: str) -> 'Link':
        """返回追加了一个属性的新链接"""
        if name == 'rel':
            return replace(self, rels=tuple(merge_tokens(self.rels, value)))
        attributes = dict(self.attributes)
        if name in TOKEN_ATTRIBUTES:
            attributes[name] = ' '.join(merge_tokens(attributes.get(name), value))
        else:
            attributes[name] = value
        return replace(self, attributes=attributes)

    def with_attributes(self, attributes: Mapping[str, Any]) -> 'Link':
        """返回整体替换属性后的新链接"""
        return replace(self, attributes=dict(attributes))

    def render(self) -> str:
        parts = [f'href="{escape(self.href)}"']
        if self.rels:
            parts.append(f'rel="{escape(" ".join(self.rels))}"')
        for name, value in self.attributes.items():
            parts.append(f'{escape(name)}="{escape(value)}"')
        return f'<a {" ".join(parts)}>{escape(self.anchor)}</a>'

    def to_dict(self) -> dict:
        """转换为字典，用于JSON序列化"""
        return {
            'label': self.anchor,
            'url': self.href,
            'attributes': dict(self.attributes),
            'rels': list(self.rels),
            'rendered': self.render()
        }

    def __str__(self) -> str:
        return self.render()
