"""
数据模式层 (Schemas)

使用 Pydantic 定义 DTO：
- 从实体映射（from_attributes），代替手写的属性拷贝
- 类型校验，实体字段缺失或类型不符时立即报错
"""

from app.schemas.menu import CategoryDTO, MenuDTO

__all__ = [
    "CategoryDTO",
    "MenuDTO",
]
