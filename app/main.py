"""
FastAPI 应用实例

负责：
1. 创建 FastAPI 应用实例
2. 配置应用生命周期（启动时建表、写入示例数据）
3. 注册所有路由
4. 配置日志和请求追踪
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import api_router
from app.config import get_settings
from app.db.seed import seed_menu_fixture
from app.db.session import SessionLocal, init_models
from app.infra.logging import get_logger, setup_logging
from app.middleware import RequestTraceMiddleware

setup_logging()
logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理器

    - 开发/测试环境：自动建表，并按 seed_fixture 写入示例数据
    - 生产环境：表结构由 Alembic 迁移管理，这里不做任何改动
    """
    logger.info(f"应用启动中... 环境: {settings.environment}")

    if settings.environment in ("dev", "development", "test"):
        await init_models()
        logger.info("数据库表初始化完成（开发模式）")

        if settings.seed_fixture:
            async with SessionLocal() as session:
                await seed_menu_fixture(session)
    else:
        logger.info("跳过自动建表，请使用 Alembic 迁移")

    yield


app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
)

app.add_middleware(RequestTraceMiddleware)

app.include_router(api_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(_: Request, exc: HTTPException):
    """
    统一错误响应格式：
    {
        "detail": "<错误信息>",
        "code": "<ERROR_CODE>"
    }
    """
    code = "UNKNOWN_ERROR"
    detail = exc.detail
    if isinstance(exc.detail, dict):
        code = exc.detail.get("code") or code
        detail = exc.detail.get("detail") or detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail, "code": code},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    # 路径参数类型错误（如 /menu/abc）映射为 VALIDATION_ERROR
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(), "code": "VALIDATION_ERROR"},
    )
