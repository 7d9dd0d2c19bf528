import pytest

from app.db.seed import CATEGORIES, MENUS, seed_menu_fixture
from app.models import Menu
from app.repositories import CategoryRepository, MenuRepository


@pytest.mark.asyncio
async def test_find_by_id(session):
    menu = await MenuRepository(session).find_by_id(7)

    assert menu is not None
    assert menu.menu_name == "민트미역국"


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(session):
    assert await MenuRepository(session).find_by_id(9999) is None


@pytest.mark.asyncio
async def test_find_all_ordered_by_code(session):
    menus = await MenuRepository(session).find_all()

    assert len(menus) == len(MENUS)
    assert [m.menu_code for m in menus] == sorted(code for code, *_ in MENUS)


@pytest.mark.asyncio
async def test_save_assigns_menu_code(session):
    """save() 之后即可读到数据库生成的主键"""
    repository = MenuRepository(session)
    menu = Menu(menu_name="마늘보쌈", menu_price=22000, category_code=4, orderable_status="Y")

    saved = await repository.save(menu)
    await session.commit()

    assert saved.menu_code is not None
    assert saved.menu_code > max(code for code, *_ in MENUS)
    found = await repository.find_by_id(saved.menu_code)
    assert found.menu_name == "마늘보쌈"


@pytest.mark.asyncio
async def test_category_find_all(session):
    categories = await CategoryRepository(session).find_all()

    assert len(categories) == len(CATEGORIES)
    top_level = [c.category_name for c in categories if c.ref_category_code is None]
    assert top_level == ["식사", "음료", "디저트"]


@pytest.mark.asyncio
async def test_seed_is_idempotent(session):
    """已有数据时再次写入会被跳过"""
    assert await seed_menu_fixture(session) is False
    assert len(await MenuRepository(session).find_all()) == len(MENUS)
