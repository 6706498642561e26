"""
hotel-manager 主应用入口
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from hotel_manager import __version__
from hotel_manager.config import settings
from hotel_manager.database import init_db
from hotel_manager.errors import (
    IntegrityViolation, UniqueViolation, ForeignKeyViolation, NotNullViolation
)
from hotel_manager.routers import (
    auth, hotels, users, rooms, employees, tasks, customers,
    reservations, room_services, expenses
)

logger = logging.getLogger(__name__)

# 约束冲突 -> HTTP 状态码
VIOLATION_STATUS = {
    UniqueViolation: status.HTTP_409_CONFLICT,
    ForeignKeyViolation: status.HTTP_409_CONFLICT,
    NotNullViolation: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logging.basicConfig(level=settings.LOG_LEVEL)
    # 表结构有误时在这里失败，不会进入请求处理
    init_db()
    logger.info("%s %s 启动完成", settings.APP_NAME, __version__)
    yield


app = FastAPI(
    title="hotel-manager - 酒店管理系统",
    description="酒店、房间、员工、客户、预订管理",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IntegrityViolation)
async def integrity_violation_handler(request: Request, exc: IntegrityViolation):
    """数据库约束冲突统一转为 JSON 错误"""
    status_code = VIOLATION_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "kind": exc.kind,
            "table": exc.table,
            "columns": list(exc.columns),
        },
    )


# 注册路由
app.include_router(auth.router)
app.include_router(hotels.router)
app.include_router(users.router)
app.include_router(rooms.router)
app.include_router(employees.router)
app.include_router(tasks.router)
app.include_router(customers.router)
app.include_router(reservations.router)
app.include_router(room_services.router)
app.include_router(expenses.router)


@app.get("/")
def root():
    """根路径"""
    return {
        "name": settings.APP_NAME,
        "version": __version__,
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
