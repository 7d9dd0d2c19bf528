"""
SQLAlchemy ORM 基类定义

所有实体（Menu、Category）都必须继承自这个 Base 类。
Base.metadata 收集全部表结构，供 create_all() 与 Alembic 迁移使用。
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# 约束命名规则，保证 Alembic 自动生成的迁移在不同数据库上名称一致
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """实体声明式基类"""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
