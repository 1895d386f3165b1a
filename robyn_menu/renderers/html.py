import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from markupsafe import Markup, escape
from robyn.templating import JinjaTemplate

from ..core.link import merge_attributes, merge_tokens
from ..core.tree import MenuItem
from .base import BaseMenuRenderer


def build_attributes(attributes: Dict[str, Any]) -> Markup:
    """把属性字典转换为 HTML 属性字符串, 空值会被忽略"""
    return Markup(''.join(
        f' {escape(name)}="{escape(value)}"'
        for name, value in attributes.items()
        if value is not None and value != ''
    ))


def add_class(value: str, class_name: str) -> str:
    return ' '.join(merge_tokens(value, class_name))


class HtmlMenuRenderer(BaseMenuRenderer):
    """渲染为 HTML 列表"""
    template_name = 'menu/html.html'
    default_options: Dict[str, Any] = {
        'menu_id': 'default',
        'menu_class': 'navbar-nav',
        'menu_item_class': 'nav-item',
        'menu_attributes': {},
        'menu_item_attributes': {'class': 'nav-link'},
        'sub_menu_class': 'dropdown-menu',
        'sub_menu_style': '',
        'open_on_hover': False,
        'animation_speed': 'fast',
        'white_spaces': 0
    }

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(options)
        self._setup_templates()

    def _setup_templates(self):
        """设置模板目录"""
        current_dir = Path(__file__).parent.parent
        self.template_dir = os.path.join(current_dir, 'templates')
        self.jinja_template = JinjaTemplate(self.template_dir)
        env = self.jinja_template.env
        env.trim_blocks = True
        env.lstrip_blocks = True
        env.keep_trailing_newline = True

    def render(self, menu: Dict[str, MenuItem], options: Optional[Dict[str, Any]] = None) -> str:
        resolved = self.resolve_options(options)
        context = self.get_context(menu, resolved)
        return self.jinja_template.env.get_template(self.template_name).render(**context)

    def get_context(self, menu: Dict[str, MenuItem], options: Dict[str, Any]) -> Dict[str, Any]:
        """构建模板上下文"""
        item_attributes = dict(options['menu_item_attributes'])
        sub_menu_class = options['sub_menu_class']

        if options['open_on_hover']:
            item_attributes = merge_attributes(item_attributes, {'class': 'dropdown-toggle'})
            item_attributes['data-toggle'] = 'dropdown'
            sub_menu_class = add_class(sub_menu_class, 'dropdown-menu')

        if options['animation_speed'] == 'fast':
            sub_menu_class = add_class(sub_menu_class, 'show')
        elif options['animation_speed'] == 'slow':
            sub_menu_class = add_class(sub_menu_class, 'slow-animation-class')

        white_spaces = options['white_spaces']
        return {
            'pad': ' ' * white_spaces,
            'menu_attrs': build_attributes({
                'id': options['menu_id'],
                'class': options['menu_class'],
                **options['menu_attributes']
            }),
            'item_attrs': build_attributes({'class': options['menu_item_class']}),
            'sub_menu_attrs': build_attributes({
                'class': sub_menu_class,
                'style': options['sub_menu_style']
            }),
            'nodes': self.build_nodes(menu, item_attributes, white_spaces + 8),
        }

    def build_nodes(self, menu: Dict[str, MenuItem], item_attributes: Dict[str, Any], indent: int) -> List[dict]:
        """递归生成模板使用的节点, indent 为 <li> 的缩进"""
        nodes = []
        for item in menu.values():
            link = item.link.with_attributes(merge_attributes(item.link.attributes, item_attributes))
            nodes.append({
                'indent': ' ' * indent,
                # 链接已转义, 模板的自动转义不能再处理一次
                'link': Markup(link.render()),
                'children': self.build_nodes(item.children, item_attributes, indent + 4)
            })
        return nodes


class BootstrapMenuRenderer(HtmlMenuRenderer):
    """渲染为 Bootstrap 导航栏"""
    template_name = 'menu/bootstrap.html'
    default_options: Dict[str, Any] = {
        'menu_id': 'default',
        'nav_class': 'navbar navbar-expand-lg navbar-light bg-light',
        'container_class': 'container',
        'wrapper_class': 'collapse navbar-collapse',
        'menu_class': 'navbar-nav',
        'menu_item_class': 'nav-item',
        'menu_attributes': {},
        'menu_item_attributes': {'class': 'nav-link'},
        'sub_menu_class': 'dropdown-menu',
        'sub_menu_style': '',
        'open_on_hover': False,
        'animation_speed': 'fast',
        'white_spaces': 4
    }

    def get_context(self, menu: Dict[str, MenuItem], options: Dict[str, Any]) -> Dict[str, Any]:
        context = super().get_context(menu, options)
        # id 放在 nav 上, ul 只保留 class 和自定义属性
        context.update({
            'nav_attrs': build_attributes({
                'id': options['menu_id'],
                'class': options['nav_class']
            }),
            'container_attrs': build_attributes({'class': options['container_class']}),
            'wrapper_attrs': build_attributes({'class': options['wrapper_class']}),
            'menu_attrs': build_attributes({
                'class': options['menu_class'],
                **options['menu_attributes']
            }),
        })
        return context
