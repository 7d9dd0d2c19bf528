"""
API 路由汇总

路由模块说明：
- health.py : 健康检查接口
- menu.py   : 菜单列表/详情页面
"""

from fastapi import APIRouter

from app.api.routes import health, menu

# 主路由器，包含所有端点
api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(menu.router, tags=["menu"])
