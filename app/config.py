"""
应用配置管理

使用 pydantic-settings 实现类型安全的配置管理：
- 支持从环境变量读取配置
- 支持从 .env 文件读取配置
- 提供默认值，确保开发环境开箱即用

配置优先级（从高到低）：
    1. 环境变量
    2. .env 文件
    3. 代码中的默认值

使用示例：
    from app.config import get_settings
    settings = get_settings()
    print(settings.database_url)
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    全局配置类

    所有配置项都可以通过环境变量覆盖，环境变量名与字段名相同（不区分大小写）。
    例如：DATABASE_URL 环境变量会覆盖 database_url 字段。
    """

    # ==================== 应用基础配置 ====================
    app_name: str = "Menu Lecture Service"  # 应用名称，显示在 API 文档中
    environment: str = "dev"                # 运行环境：dev/staging/prod
    log_level: str = "INFO"                 # 日志级别：DEBUG/INFO/WARNING/ERROR
    log_json: bool | None = None            # 日志格式：True=JSON，None=自动（prod用JSON）

    # ==================== 数据库配置 ====================
    # 默认使用本地 SQLite 文件，方便直接运行课堂示例
    # 也可以切换到 PostgreSQL：postgresql+asyncpg://用户名:密码@主机:端口/数据库名
    database_url: str = "sqlite+aiosqlite:///./menu.db"
    database_echo: bool = False  # 是否打印 SQL 语句（观察 ORM 生成的 SQL 时打开）

    # ==================== 示例数据 ====================
    # 开发环境启动时写入菜单/分类示例数据（已存在则跳过）
    seed_fixture: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def is_sqlite(self) -> bool:
        """当前数据库是否为 SQLite（SQLite 不支持连接池参数）"""
        return self.database_url.startswith("sqlite")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    获取配置单例

    使用 @lru_cache 缓存配置实例，整个应用只创建一次 Settings 对象。

    Returns:
        Settings: 全局配置实例
    """
    return Settings()
