"""
视图模板

使用 Jinja2 渲染 HTML 视图，模板文件位于 app/templates/。
视图名与模板路径一一对应：menu/detail → app/templates/menu/detail.html
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
