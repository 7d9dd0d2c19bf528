"""
初始数据库迁移脚本

创建课堂示例使用的两张表：
- tbl_category : 分类表（两级结构，自引用）
- tbl_menu     : 菜单表

Revision ID: 20261019_0001
Revises: 无（初始迁移）
Create Date: 2026-10-19 00:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """升级：创建所有表"""
    op.create_table(
        "tbl_category",
        sa.Column("category_code", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_name", sa.String(length=30), nullable=False),
        sa.Column("ref_category_code", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["ref_category_code"],
            ["tbl_category.category_code"],
            name="fk_tbl_category_ref_category_code_tbl_category",
        ),
        sa.PrimaryKeyConstraint("category_code", name="pk_tbl_category"),
    )

    op.create_table(
        "tbl_menu",
        sa.Column("menu_code", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("menu_name", sa.String(length=30), nullable=False),
        sa.Column("menu_price", sa.Integer(), nullable=False),
        sa.Column("category_code", sa.Integer(), nullable=False),
        sa.Column("orderable_status", sa.String(length=1), nullable=False),
        sa.ForeignKeyConstraint(
            ["category_code"],
            ["tbl_category.category_code"],
            name="fk_tbl_menu_category_code_tbl_category",
        ),
        sa.PrimaryKeyConstraint("menu_code", name="pk_tbl_menu"),
    )
    op.create_index("ix_tbl_menu_category_code", "tbl_menu", ["category_code"])


def downgrade() -> None:
    """降级：按依赖逆序删除"""
    op.drop_index("ix_tbl_menu_category_code", table_name="tbl_menu")
    op.drop_table("tbl_menu")
    op.drop_table("tbl_category")
