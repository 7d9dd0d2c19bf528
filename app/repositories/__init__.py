"""
数据访问层 (Repositories)

API层 → 服务层 → 数据访问层 → 实体
"""

from app.repositories.menu import CategoryRepository, MenuRepository

__all__ = ["CategoryRepository", "MenuRepository"]
