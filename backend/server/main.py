import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config.settings import SERVER_LOG_LEVEL, UVICORN_CONFIG
from server.api.rest.dependencies import shutdown_dependencies
from server.api_router import api_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    try:
        yield
    finally:
        # 应用关闭时取消未完成的同步任务并关闭 HTTP 会话
        await shutdown_dependencies()


# 初始化 FastAPI 应用
app = FastAPI(title="CineLog", description="个人观影日志（本地存储 + 表格云同步）", lifespan=_lifespan)

# 添加路由
app.include_router(api_router)


# 启动服务器
if __name__ == "__main__":
    logging.basicConfig(level=SERVER_LOG_LEVEL.upper())
    uvicorn.run("server.main:app", **UVICORN_CONFIG)
