import logging
from typing import Any, Optional

from robyn import Robyn, Request, Response, jsonify

from .menu import MenuManager
from ..renderers.base import BaseMenuRenderer
from ..renderers.data import JsonMenuRenderer
from ..renderers.html import HtmlMenuRenderer

logger = logging.getLogger(__name__)


class MenuSite:
    """菜单站点, 把菜单挂到 Robyn 应用的路由上"""
    def __init__(
        self,
        app: Robyn,
        manager: MenuManager,
        name: str = 'menu',
        renderer: Optional[BaseMenuRenderer] = None
    ):
        """
        :param app: Robyn应用实例
        :param manager: 菜单管理器
        :param name: 路由前缀
        :param renderer: HTML渲染器, 默认使用管理器的渲染器
        """
        self.app = app
        self.manager = manager
        self.name = name
        self.renderer = renderer or manager.renderer or HtmlMenuRenderer()
        self.json_renderer = JsonMenuRenderer()
        self._setup_routes()

    def _setup_routes(self):
        """设置路由"""
        @self.app.get(f"/{self.name}/:menu_id")
        async def menu_html(request: Request):
            menu_id = request.path_params.get("menu_id")
            if not self.has_menu(menu_id):
                return self._not_found(menu_id)
            html = self.render_menu(menu_id)
            return Response(
                status_code=200,
                description=html,
                headers={"Content-Type": "text/html; charset=utf-8"}
            )

        @self.app.get(f"/{self.name}/:menu_id/json")
        async def menu_json(request: Request):
            menu_id = request.path_params.get("menu_id")
            if not self.has_menu(menu_id):
                return self._not_found(menu_id)
            # JSON 不经过缓存, 缓存键只区分菜单ID
            data = self.with_menu(
                menu_id,
                lambda: self.json_renderer.render(self.manager.build(), {"menu_id": menu_id})
            )
            return Response(
                status_code=200,
                description=data,
                headers={"Content-Type": "application/json"}
            )

        @self.app.get(f"/{self.name}/:menu_id/source")
        async def menu_source(request: Request):
            menu_id = request.path_params.get("menu_id")
            if not self.has_menu(menu_id):
                return self._not_found(menu_id)
            return jsonify(self.manager.export_source(menu_id) or {})

        self.routes = {
            "html": menu_html,
            "json": menu_json,
            "source": menu_source,
        }

    def has_menu(self, menu_id: Optional[str]) -> bool:
        return bool(menu_id) and menu_id in self.manager.get_menu_ids()

    def render_menu(self, menu_id: str) -> Any:
        """渲染指定菜单"""
        return self.with_menu(menu_id, lambda: self.manager.render(renderer=self.renderer))

    def with_menu(self, menu_id: str, func):
        """临时切换当前菜单执行 func, 结束后恢复"""
        previous = self.manager.get_current_id()
        self.manager.set_current_id(menu_id)
        try:
            return func()
        finally:
            self.manager.set_current_id(previous)

    def _not_found(self, menu_id: Optional[str]) -> Response:
        logger.info("菜单不存在: %s", menu_id)
        return Response(
            status_code=404,
            description="菜单不存在",
            headers={"Content-Type": "text/plain; charset=utf-8"}
        )
