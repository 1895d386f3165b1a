from robyn import Robyn
from robyn_menu import MenuManager, MenuSite, BootstrapMenuRenderer, MemoryCache

app = Robyn(__file__)

# 创建菜单管理器 - 渲染结果缓存60秒
menu_manager = MenuManager(BootstrapMenuRenderer(), MemoryCache())
menu_manager.set_cache_ttl(60)
menu_manager.set_url_replace_vars("{site}", "http://127.0.0.1:8100")

# 注册菜单
menu_manager.add_item("home", "首页", "{site}/")
menu_manager.add_item("shop", "商店", "{site}/shop", weight=20)
menu_manager.add_item("orders", "订单", "{site}/shop/orders", parent_key="shop")
menu_manager.add_item("docs", "文档", "https://robyn.tech", rels=["nofollow"], weight=90)
menu_manager.make_active("home")

# 第二个菜单从导入数据创建
menu_manager.import_source({
    "footer": {
        "about": {"label": "关于", "url": "{site}/about"},
        "contact": {"label": "联系我们", "url": "{site}/contact", "weight": 10},
    }
})
menu_manager.set_current_id("default")

# GET /menu/default, /menu/default/json, /menu/footer/source
menu_site = MenuSite(app, menu_manager)

if __name__ == "__main__":
    app.start(host="127.0.0.1", port=8100)
