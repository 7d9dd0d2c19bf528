"""
菜单页面接口

- GET /menu/list        : 菜单列表页
- GET /menu/{menu_code} : 菜单详情页

/menu/list 必须先于 /menu/{menu_code} 注册，否则 "list" 会被当作菜单编号解析。
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.deps import get_menu_service
from app.infra.logging import get_logger
from app.infra.templates import templates
from app.services.menu import MenuService

logger = get_logger(__name__)

router = APIRouter(prefix="/menu")


@router.get("/list", response_class=HTMLResponse)
async def find_menu_list(
    request: Request,
    menu_service: MenuService = Depends(get_menu_service),
):
    """菜单列表（分页之前的版本，一次返回全部菜单，分类编号显示为分类名）"""
    menu_list = await menu_service.find_menu_list()
    category_names = {
        category.category_code: category.category_name
        for category in await menu_service.find_all_categories()
    }
    return templates.TemplateResponse(
        request,
        "menu/list.html",
        {"menu_list": menu_list, "category_names": category_names},
    )


@router.get("/{menu_code}", response_class=HTMLResponse)
async def find_menu_by_code(
    menu_code: int,
    request: Request,
    menu_service: MenuService = Depends(get_menu_service),
):
    """
    菜单详情

    路径参数 menu_code 即主键。菜单不存在时 MenuNotFoundError 直接向上抛出。
    """
    logger.info(f"menuCode: {menu_code}")

    menu = await menu_service.find_menu_by_code(menu_code)
    return templates.TemplateResponse(request, "menu/detail.html", {"menu": menu})
