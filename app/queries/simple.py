"""
基础查询示例 (Simple Queries)

演示面向实体的查询写法：查询语句里写的是实体类和属性（Menu.menu_name），
而不是表名和列名，由 SQLAlchemy 负责翻译成 SQL 并执行。

两种取单值的方式，查询本身相同，区别只在结果的类型：
- 类型化：session.scalars(stmt) 返回 ScalarResult[str]，one() 直接得到 str
- 非类型化：session.execute(stmt) 返回 Row，按下标取出的值对外声明为 Any

one() / scalars().all() 的区别：
- one(): 结果必须恰好一行，0 行抛 NoResultFound，多行抛 MultipleResultsFound
- scalars().all(): 返回列表，没有结果时为空列表

本模块不拦截、不转换查询引擎抛出的异常，由调用方自行处理。

使用示例：
    from app.queries.simple import find_menu_name_by_code

    async with SessionLocal() as session:
        name = await find_menu_name_by_code(session, 7)
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.logging import get_logger
from app.models import Menu

logger = get_logger(__name__)


def _menu_name_by_code(menu_code: int) -> Select[tuple[str]]:
    """SELECT menu_name FROM tbl_menu WHERE menu_code = :menu_code"""
    return select(Menu.menu_name).where(Menu.menu_code == menu_code)


async def find_menu_name_by_code(session: AsyncSession, menu_code: int) -> str:
    """单行单列查询（类型化）"""
    result = await session.scalars(_menu_name_by_code(menu_code))
    menu_name = result.one()

    logger.debug(f"resultMenuName = {menu_name}")
    return menu_name


async def find_menu_name_by_code_untyped(session: AsyncSession, menu_code: int) -> Any:
    """
    单行单列查询（非类型化）

    同样的实体查询，但取回的是整行，值的类型要由调用方自己判断。
    """
    result = await session.execute(_menu_name_by_code(menu_code))
    row = result.one()
    menu_name = row[0]

    logger.debug(f"resultMenuName = {menu_name}")
    return menu_name


async def find_all_menus(session: AsyncSession) -> list[Menu]:
    """
    多行多列查询

    select(Menu) 选择整个实体，相当于查询所有列，每一行映射为一个 Menu 对象。
    """
    result = await session.execute(select(Menu).order_by(Menu.menu_code))
    menus = list(result.scalars().all())

    for menu in menus:
        logger.debug(repr(menu))
    return menus


async def find_distinct_category_codes(session: AsyncSession) -> list[int]:
    """
    DISTINCT 去重查询：菜单中实际出现过的分类编号
    """
    stmt = select(Menu.category_code).distinct().order_by(Menu.category_code)
    result = await session.execute(stmt)
    category_codes = list(result.scalars().all())

    logger.debug(f"categoryCodeList = {category_codes}")
    return category_codes


async def find_menus_in_categories(session: AsyncSession, category_codes: Iterable[int]) -> list[Menu]:
    """
    IN 运算符查询：分类编号属于给定集合的菜单

    例如 category_codes=(6, 10) 相当于 WHERE category_code IN (6, 10)
    """
    stmt = (
        select(Menu)
        .where(Menu.category_code.in_(list(category_codes)))
        .order_by(Menu.menu_code)
    )
    result = await session.execute(stmt)
    menus = list(result.scalars().all())

    for menu in menus:
        logger.debug(repr(menu))
    return menus


async def find_menus_name_like(session: AsyncSession, keyword: str) -> list[Menu]:
    """
    LIKE 运算符查询：菜单名称包含 keyword 的菜单

    生成 WHERE menu_name LIKE '%' || :keyword || '%'，
    autoescape 会转义 keyword 中的 % 和 _，使其按字面匹配。
    """
    stmt = (
        select(Menu)
        .where(Menu.menu_name.contains(keyword, autoescape=True))
        .order_by(Menu.menu_code)
    )
    result = await session.execute(stmt)
    menus = list(result.scalars().all())

    for menu in menus:
        logger.debug(repr(menu))
    return menus
