"""菜单 / 分类相关的 DTO"""

from pydantic import BaseModel, ConfigDict


class MenuDTO(BaseModel):
    """菜单 DTO，用于视图层展示"""
    menu_code: int
    menu_name: str
    menu_price: int
    category_code: int
    orderable_status: str

    model_config = ConfigDict(from_attributes=True)  # 允许从 ORM 对象构造


class CategoryDTO(BaseModel):
    """分类 DTO"""
    category_code: int
    category_name: str
    ref_category_code: int | None = None

    model_config = ConfigDict(from_attributes=True)
