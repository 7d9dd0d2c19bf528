"""
测试公共夹具

每个测试使用独立的内存 SQLite 数据库（StaticPool 保证同一连接），
建表并写入示例数据，相当于每个测试打开/关闭一次会话工厂。
"""

import os

# 设置测试环境变量（必须在导入 app 模块之前）
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_FIXTURE", "false")

import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.seed import seed_menu_fixture  # noqa: E402
from app.db.session import init_models  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """内存数据库引擎，测试结束后释放"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    """已写入示例数据的会话工厂"""
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        await seed_menu_fixture(session)
    return factory


@pytest_asyncio.fixture
async def session(session_factory):
    """单个测试使用的会话，结束后自动关闭"""
    async with session_factory() as session:
        yield session
