class MenuNotFoundError(ValueError):
    """按编号找不到菜单（非法参数）"""

    def __init__(self, menu_code: int):
        super().__init__(f"menu_code={menu_code} 对应的菜单不存在")
        self.menu_code = menu_code
