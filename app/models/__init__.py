"""
实体层 (ORM Models)

使用 SQLAlchemy ORM 映射课堂示例的两张表：

    Category (tbl_category)
       │
       └── Menu (tbl_menu)

核心概念：
- Entity: 由 ORM 管理的对象，对应表中的一行
- 查询时使用实体类和属性（select(Menu.menu_name)），由 SQLAlchemy 翻译为 SQL
"""

from app.models.category import Category
from app.models.menu import Menu

__all__ = [
    "Category",
    "Menu",
]
