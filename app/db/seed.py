"""
课堂示例数据

向 tbl_category / tbl_menu 写入固定的示例数据，查询示例和测试都基于这份数据：
- 菜单编号 7 是「민트미역국」
- 分类 6、10 下都有菜单
- 名称中含「마늘」的菜单有两道

重复调用是安全的：表中已有菜单时直接跳过。
"""

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.logging import get_logger
from app.models import Category, Menu

logger = get_logger(__name__)

# (category_code, category_name, ref_category_code)
CATEGORIES = [
    (1, "식사", None),
    (2, "음료", None),
    (3, "디저트", None),
    (4, "한식", 1),
    (5, "중식", 1),
    (6, "일식", 1),
    (7, "퓨전", 1),
    (8, "커피", 2),
    (9, "쥬스", 2),
    (10, "기타", 2),
    (11, "동양", 3),
    (12, "서양", 3),
]

# (menu_code, menu_name, menu_price, category_code, orderable_status)
MENUS = [
    (1, "열무김치라떼", 4500, 8, "Y"),
    (2, "우럭스무디", 5000, 10, "Y"),
    (3, "생갈치쉐이크", 6000, 10, "Y"),
    (4, "갈릭미역파르페", 7000, 10, "Y"),
    (5, "앙버터김치찜", 13000, 4, "N"),
    (6, "생마늘샐러드", 12000, 4, "Y"),
    (7, "민트미역국", 15000, 4, "Y"),
    (8, "한우딸기국밥", 20000, 4, "Y"),
    (9, "홍어마카롱", 9000, 12, "Y"),
    (10, "코다리마늘빵", 7000, 12, "N"),
    (11, "정어리빙수", 10000, 10, "Y"),
    (12, "날치알스크류바", 2000, 10, "Y"),
    (13, "직화구이젤라또", 8000, 12, "Y"),
    (14, "과메기커틀릿", 13000, 6, "Y"),
    (15, "죽방멸치튀김우동", 11000, 6, "Y"),
    (16, "흑당곱창전골", 18000, 5, "Y"),
    (17, "붕어빵초밥", 35000, 6, "Y"),
    (18, "까나리코코넛쥬스", 9000, 9, "Y"),
]

# 使用自增主键的 (表名, 主键列)
SERIAL_COLUMNS = (
    ("tbl_category", "category_code"),
    ("tbl_menu", "menu_code"),
)


async def _sync_serial_sequences(session: AsyncSession) -> None:
    """
    把自增序列推进到当前最大主键

    示例数据显式写入了主键，PostgreSQL 的 SERIAL 序列不会随之前进，
    不同步的话之后不带主键的 INSERT 会从 1 开始取号而主键冲突。
    SQLite 按 max(rowid)+1 取号，无需处理。
    """
    if session.bind.dialect.name != "postgresql":
        return

    for table, column in SERIAL_COLUMNS:
        await session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', '{column}'), "
                f"(SELECT max({column}) FROM {table}))"
            )
        )


async def seed_menu_fixture(session: AsyncSession) -> bool:
    """
    写入示例数据

    Args:
        session: 数据库会话

    Returns:
        True 表示本次写入了数据，False 表示已有数据被跳过
    """
    existing = await session.scalar(select(func.count()).select_from(Menu))
    if existing:
        logger.debug(f"tbl_menu 已有 {existing} 条数据，跳过示例数据写入")
        return False

    session.add_all(
        Category(category_code=code, category_name=name, ref_category_code=ref)
        for code, name, ref in CATEGORIES
    )
    # 先写入分类，保证菜单的外键能找到对应分类
    await session.flush()

    session.add_all(
        Menu(
            menu_code=code,
            menu_name=name,
            menu_price=price,
            category_code=category_code,
            orderable_status=status,
        )
        for code, name, price, category_code, status in MENUS
    )
    await session.flush()
    await _sync_serial_sequences(session)
    await session.commit()

    logger.info(f"示例数据写入完成：{len(CATEGORIES)} 个分类，{len(MENUS)} 道菜单")
    return True
