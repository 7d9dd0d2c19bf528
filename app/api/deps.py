"""
API 依赖注入函数

FastAPI 会自动调用这些函数，并把结果注入到路由处理函数中：
    会话 → Repository → Service

使用示例：
    @router.get("/menu/{menu_code}")
    async def endpoint(service: MenuService = Depends(get_menu_service)):
        pass
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories import CategoryRepository, MenuRepository
from app.services.menu import MenuService

# 重新导出数据库会话获取函数，方便路由模块导入
get_db_session = get_db


async def get_menu_service(db: AsyncSession = Depends(get_db_session)) -> MenuService:
    """按请求组装 MenuService，Repository 共享同一个会话"""
    return MenuService(MenuRepository(db), CategoryRepository(db))
