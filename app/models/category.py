"""
分类实体 (Category)

映射 tbl_category 表。分类是两级结构：
顶层分类（식사/음료/디저트）的 ref_category_code 为空，
子分类通过 ref_category_code 指向上级分类。
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Category(Base):
    """分类表"""
    __tablename__ = "tbl_category"

    category_code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    category_name: Mapped[str] = mapped_column(String(30), nullable=False)

    # 上级分类，顶层分类为 None
    ref_category_code: Mapped[int | None] = mapped_column(
        ForeignKey("tbl_category.category_code"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"Category(category_code={self.category_code}, "
            f"category_name={self.category_name!r}, "
            f"ref_category_code={self.ref_category_code})"
        )
