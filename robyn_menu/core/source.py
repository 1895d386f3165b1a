from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import InvalidImportRecordError
from .link import Link
from .tree import DEFAULT_WEIGHT


@dataclass
class MenuSourceRecord:
    """菜单项的导入/导出记录"""
    label: str
    url: str
    parent_key: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    rels: List[str] = field(default_factory=list)
    weight: int = DEFAULT_WEIGHT

    @classmethod
    def from_link(cls, link: Link, parent_key: Optional[str] = None, weight: int = DEFAULT_WEIGHT) -> 'MenuSourceRecord':
        return cls(
            label=link.anchor,
            url=link.href,
            parent_key=parent_key,
            attributes=dict(link.attributes),
            rels=list(link.rels),
            weight=weight
        )

    @classmethod
    def from_dict(cls, key: Any, data: Any) -> 'MenuSourceRecord':
        """校验并创建记录, 出错时抛出 InvalidImportRecordError"""
        if not isinstance(key, str) or not key:
            raise InvalidImportRecordError(key, 'key', "菜单键必须是非空字符串")
        if not isinstance(data, Mapping):
            raise InvalidImportRecordError(key, 'record', "记录必须是字典")

        label = data.get('label')
        url = data.get('url')
        parent_key = data.get('parent_key')
        attributes = data.get('attributes', {})
        rels = data.get('rels', [])
        weight = data.get('weight', DEFAULT_WEIGHT)

        if not isinstance(label, str) or not label:
            raise InvalidImportRecordError(key, 'label', "label 是必填的字符串")
        if not isinstance(url, str) or not url:
            raise InvalidImportRecordError(key, 'url', "url 是必填的字符串")
        if parent_key is not None and not isinstance(parent_key, str):
            raise InvalidImportRecordError(key, 'parent_key', "parent_key 必须是字符串或 None")
        if not isinstance(attributes, Mapping):
            raise InvalidImportRecordError(key, 'attributes', "attributes 必须是字典")
        if not isinstance(rels, (list, tuple)):
            raise InvalidImportRecordError(key, 'rels', "rels 必须是列表")
        # bool 是 int 的子类, 需要单独排除
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidImportRecordError(key, 'weight', "weight 必须是整数")

        return cls(
            label=label,
            url=url,
            parent_key=parent_key,
            attributes=dict(attributes),
            rels=list(rels),
            weight=weight
        )

    def to_dict(self) -> dict:
        """转换为字典，用于JSON序列化"""
        return {
            'label': self.label,
            'url': self.url,
            'parent_key': self.parent_key,
            'attributes': dict(self.attributes),
            'rels': list(self.rels),
            'weight': self.weight
        }
