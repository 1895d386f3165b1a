from typing import Any, Optional


class MenuError(ValueError):
    """菜单错误基类"""


class DuplicateKeyError(MenuError):
    """菜单键已存在"""
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"菜单键已存在: {key}")


class EmptyAnchorError(MenuError):
    """链接文本为空"""
    def __init__(self, key: Optional[str] = None):
        self.key = key
        super().__init__(f"链接文本不能为空: {key}")


class ParentNotFoundError(MenuError):
    """父菜单不存在"""
    def __init__(self, key: str, parent_key: str):
        self.key = key
        self.parent_key = parent_key
        super().__init__(f"父菜单不存在: {parent_key} (子菜单 {key})")


class KeyNotFoundError(MenuError):
    """菜单键不存在"""
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"菜单键不存在: {key}")


class InvalidImportRecordError(MenuError):
    """导入记录校验失败, field 为出错的字段"""
    def __init__(self, key: Any, field: str, message: str):
        self.key = key
        self.field = field
        super().__init__(f"导入记录 {key} 的字段 {field} 无效: {message}")


class UnknownOptionError(MenuError):
    """未知的渲染选项"""
    def __init__(self, option: str):
        self.option = option
        super().__init__(f"未知的渲染选项: {option}")


class OptionTypeMismatchError(MenuError):
    """渲染选项类型不匹配"""
    def __init__(self, option: str, expected: str, actual: str):
        self.option = option
        self.expected = expected
        self.actual = actual
        super().__init__(f"渲染选项 {option} 类型错误, 期望 {expected}, 实际 {actual}")


class NoRendererConfiguredError(MenuError):
    """没有可用的渲染器"""
    def __init__(self):
        super().__init__("未配置菜单渲染器")


class MenuIdNotFoundError(MenuError):
    """导入时指定的菜单ID不存在"""
    def __init__(self, menu_id: str):
        self.menu_id = menu_id
        super().__init__(f"导入数据中不存在菜单ID: {menu_id}")
