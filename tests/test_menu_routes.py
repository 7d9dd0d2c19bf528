"""
菜单页面接口测试

通过 ASGITransport 直接调用应用，get_db 替换为内存数据库会话。
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.session import get_db
from app.main import app


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    # 未捕获的异常由框架转换为 500 响应，而不是在测试中抛出
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_menu_detail_renders_menu(client):
    resp = await client.get("/menu/7")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "민트미역국" in resp.text
    assert "15000" in resp.text


@pytest.mark.asyncio
async def test_menu_list_renders_all_menus(client):
    resp = await client.get("/menu/list")

    assert resp.status_code == 200
    assert "메뉴 목록" in resp.text
    assert "열무김치라떼" in resp.text
    assert "민트미역국" in resp.text
    assert 'href="/menu/7"' in resp.text


@pytest.mark.asyncio
async def test_menu_list_shows_category_names(client):
    """分类编号通过 CategoryRepository 显示为分类名"""
    resp = await client.get("/menu/list")

    assert resp.status_code == 200
    assert "<td>한식</td>" in resp.text
    assert "<td>일식</td>" in resp.text
    assert "<td>기타</td>" in resp.text


@pytest.mark.asyncio
async def test_missing_menu_is_not_translated(client):
    """MenuNotFoundError 不做转换，走框架默认的 500"""
    resp = await client.get("/menu/9999")

    assert resp.status_code == 500


@pytest.mark.asyncio
async def test_non_integer_menu_code_returns_validation_error(client):
    resp = await client.get("/menu/abc")

    assert resp.status_code == 422
    assert resp.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client):
    resp = await client.get("/menu/7", headers={"X-Request-ID": "req-123"})

    assert resp.headers["X-Request-ID"] == "req-123"
    assert resp.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "ok"}
