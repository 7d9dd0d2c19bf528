"""
菜单实体 (Menu)

映射 tbl_menu 表的一行。菜单编号 menu_code 全表唯一，是按编号查询的主键。

课堂示例中的数据由 app/db/seed.py 预先写入，本服务只读取；
新增菜单通过 MenuRepository.save()（session.add）完成。
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Menu(Base):
    """
    菜单表

    字段说明：
    - menu_code: 菜单编号（主键）
    - menu_name: 菜单名称
    - menu_price: 价格
    - category_code: 所属分类编号
    - orderable_status: 是否可点单（Y/N）
    """
    __tablename__ = "tbl_menu"

    menu_code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    menu_name: Mapped[str] = mapped_column(String(30), nullable=False)

    menu_price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    category_code: Mapped[int] = mapped_column(
        ForeignKey("tbl_category.category_code"),
        nullable=False,
        index=True,
    )

    orderable_status: Mapped[str] = mapped_column(String(1), nullable=False, default="Y")

    def __repr__(self) -> str:
        return (
            f"Menu(menu_code={self.menu_code}, menu_name={self.menu_name!r}, "
            f"menu_price={self.menu_price}, category_code={self.category_code}, "
            f"orderable_status={self.orderable_status!r})"
        )
