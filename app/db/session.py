"""
数据库会话管理

这个模块负责：
1. 创建数据库引擎（连接池）
2. 提供异步会话工厂
3. 实现 FastAPI 依赖注入的数据库会话获取函数

核心概念：
- Engine: 数据库连接池，管理与数据库的物理连接
- Session: 数据库会话，用于执行查询和管理实体的生命周期
- SessionLocal: 会话工厂，每个请求从这里创建独立的会话

使用方式（在 FastAPI 路由中）：
    from app.db.session import get_db

    @router.get("/menus")
    async def get_menus(db: AsyncSession = Depends(get_db)):
        result = await db.execute(select(Menu))
        return result.scalars().all()
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import Settings, get_settings
from app.db.base import Base


def build_engine(settings: Settings) -> AsyncEngine:
    """
    根据配置创建异步引擎

    SQLite 是本地文件/内存库，不需要 pool_size、pool_recycle 等连接池参数，
    因此只有服务端数据库才配置连接池。
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
        )
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,     # 从连接池取连接前先测试连接是否有效
        pool_size=10,           # 连接池保持的连接数
        max_overflow=20,        # 允许超出 pool_size 的额外连接数
        pool_timeout=30,        # 获取连接的超时时间（秒）
        pool_recycle=1800,      # 连接回收时间（秒），防止数据库端超时断开
    )


# ==================== 创建数据库引擎 ====================
engine = build_engine(get_settings())

# ==================== 创建会话工厂 ====================
# 每个请求使用独立的会话
SessionLocal = async_sessionmaker(
    engine,
    expire_on_commit=False,  # 提交后不自动过期对象，映射 DTO 时不会触发额外查询
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    获取数据库会话（FastAPI 依赖注入函数）

    为每个请求创建一个新的会话，请求处理完成后自动关闭，
    即使发生异常也能保证资源释放。

    Yields:
        AsyncSession: 异步数据库会话对象
    """
    async with SessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine | None = None) -> None:
    """
    初始化数据库表（仅开发/测试环境使用）

    生产环境应该使用 Alembic 进行数据库迁移，此方法不会修改已存在的表结构。

    Args:
        bind: 目标引擎，默认使用全局引擎（测试时可传入内存库引擎）
    """
    from app import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
