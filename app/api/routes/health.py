"""
健康检查接口

用于容器编排系统的存活/就绪探测，顺带检查数据库是否可连接。
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session

router = APIRouter()


@router.get("/health")
async def healthcheck(db: AsyncSession = Depends(get_db_session)) -> dict:
    """返回 {"status": "ok", "database": "ok"} 表示服务和数据库都正常"""
    await db.execute(text("SELECT 1"))
    return {"status": "ok", "database": "ok"}
