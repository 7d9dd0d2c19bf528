"""
Menu Lecture Service - 启动入口

运行方式：
    - 直接执行：python main.py
    - 或者使用：uvicorn app.main:app --reload

服务启动后可以访问：
    - 菜单列表：http://localhost:8000/menu/list
    - 菜单详情：http://localhost:8000/menu/7
    - 健康检查：http://localhost:8000/health
"""

import uvicorn


def main() -> None:
    """使用 uvicorn 启动 FastAPI 服务器（开发模式，代码修改后自动重启）"""
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
