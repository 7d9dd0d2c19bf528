"""
菜单服务 (Menu Service)

Service 层负责业务逻辑和 DTO <-> Entity 的转换：
- 调用 Repository 获取实体
- 找不到数据时抛出 MenuNotFoundError
- 用 MenuDTO.model_validate() 把实体映射为 DTO 交给视图层

使用示例：
    service = MenuService(MenuRepository(session), CategoryRepository(session))
    menu = await service.find_menu_by_code(7)
"""

from app.exceptions import MenuNotFoundError
from app.repositories import CategoryRepository, MenuRepository
from app.schemas import CategoryDTO, MenuDTO


class MenuService:

    def __init__(self, menu_repository: MenuRepository, category_repository: CategoryRepository):
        self.menu_repository = menu_repository
        self.category_repository = category_repository

    async def find_menu_by_code(self, menu_code: int) -> MenuDTO:
        """
        按编号查询菜单

        Raises:
            MenuNotFoundError: 菜单不存在
        """
        menu = await self.menu_repository.find_by_id(menu_code)
        if menu is None:
            raise MenuNotFoundError(menu_code)

        return MenuDTO.model_validate(menu)

    async def find_menu_list(self) -> list[MenuDTO]:
        """查询全部菜单（暂不分页）"""
        menus = await self.menu_repository.find_all()
        return [MenuDTO.model_validate(menu) for menu in menus]

    async def find_all_categories(self) -> list[CategoryDTO]:
        categories = await self.category_repository.find_all()
        return [CategoryDTO.model_validate(category) for category in categories]
