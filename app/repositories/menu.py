"""
菜单 / 分类数据访问层

Repository 只负责和数据库打交道，不包含业务判断：
找不到数据时返回 None，是否报错由 Service 层决定。
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.logging import get_logger
from app.models import Category, Menu

logger = get_logger(__name__)


class MenuRepository:
    """tbl_menu 的 CRUD 仓库"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, menu_code: int) -> Menu | None:
        """按主键查询，找不到返回 None"""
        return await self.session.get(Menu, menu_code)

    async def find_all(self) -> list[Menu]:
        """查询全部菜单（按编号排序）"""
        result = await self.session.execute(select(Menu).order_by(Menu.menu_code))
        return list(result.scalars().all())

    async def save(self, menu: Menu) -> Menu:
        """
        保存菜单

        session.add() 把实体纳入会话管理，flush 后数据库生成的 menu_code 即可读取。
        事务由调用方提交。
        """
        self.session.add(menu)
        await self.session.flush()
        logger.debug(f"保存菜单: {menu!r}")
        return menu


class CategoryRepository:
    """tbl_category 的只读仓库"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> list[Category]:
        result = await self.session.execute(select(Category).order_by(Category.category_code))
        return list(result.scalars().all())
