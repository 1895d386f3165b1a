import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.exceptions import OptionTypeMismatchError, UnknownOptionError
from ..core.tree import MenuItem


def option_type(value: Any) -> str:
    """选项值的基础类型名"""
    # bool 是 int 的子类, 必须先判断
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'integer'
    if isinstance(value, float):
        return 'float'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (list, tuple, dict)):
        return 'array'
    if value is None:
        return 'null'
    return type(value).__name__


class BaseMenuRenderer(ABC):
    """菜单渲染器基类

    default_options 同时是选项的白名单和类型定义.
    构造时传入的选项会保存在实例上, render 时传入的选项只对本次渲染有效.
    """
    default_options: Dict[str, Any] = {
        'menu_id': 'default'
    }

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = copy.deepcopy(self.default_options)
        self.options.update(self.validate_options(options))

    def validate_options(self, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """校验选项名称和类型"""
        if not options:
            return {}
        for name, value in options.items():
            if name not in self.default_options:
                raise UnknownOptionError(name)
            default = self.default_options[name]
            expected = option_type(default)
            actual = option_type(value)
            if expected != actual:
                raise OptionTypeMismatchError(name, expected, actual)
            # 属性类选项会被展开成 HTML 属性, 必须是字典
            if isinstance(default, dict) and not isinstance(value, dict):
                raise OptionTypeMismatchError(name, 'dict', type(value).__name__)
        return dict(options)

    def resolve_options(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """合并实例选项和本次渲染的选项"""
        resolved = copy.deepcopy(self.options)
        resolved.update(self.validate_options(options))
        return resolved

    def get_options(self) -> Dict[str, Any]:
        return copy.deepcopy(self.options)

    @abstractmethod
    def render(self, menu: Dict[str, MenuItem], options: Optional[Dict[str, Any]] = None) -> Any:
        """渲染排序后的菜单树"""
        pass
