import json
from typing import Any, Dict, Optional

from ..core.tree import MenuItem
from .base import BaseMenuRenderer


class ArrayMenuRenderer(BaseMenuRenderer):
    """渲染为嵌套字典"""
    default_options: Dict[str, Any] = {
        'menu_id': 'default'
    }

    def render(self, menu: Dict[str, MenuItem], options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.resolve_options(options)
        return self.build_tree(menu)

    def build_tree(self, menu: Dict[str, MenuItem]) -> Dict[str, Any]:
        return {key: item.to_dict() for key, item in menu.items()}


class JsonMenuRenderer(ArrayMenuRenderer):
    """渲染为格式化的JSON字符串"""
    default_options: Dict[str, Any] = {
        'menu_id': 'default',
        'indent': 4
    }

    def render(self, menu: Dict[str, MenuItem], options: Optional[Dict[str, Any]] = None) -> str:
        resolved = self.resolve_options(options)
        return json.dumps(self.build_tree(menu), indent=resolved['indent'], ensure_ascii=False)
